"""
主程序入口
命令行方式使用课程评价系统
"""
import sys
import argparse
from database import Database
from services import AppContext, View


def parse_args(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='课程评价系统',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python src/main.py init-db
  python src/main.py register --username alice --password password123
  python src/main.py add-course --subject CS --number 2100 --title "Data Structures"
  python src/main.py search --subject cs --title data
  python src/main.py review --username alice --password password123 --course-id 1 --rating 4
  python src/main.py review --username alice --password password123 --course-id 1 --delete
  python src/main.py my-reviews --username alice --password password123
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='创建数据表（已存在则跳过）')

    register = subparsers.add_parser('register', help='注册新用户')
    register.add_argument('--username', required=True)
    register.add_argument('--password', required=True)
    register.add_argument('--confirm-password', help='不指定则与 --password 相同')

    add_course = subparsers.add_parser('add-course', help='新建课程')
    add_course.add_argument('--subject', required=True, help='2-4 个字母，如 CS')
    add_course.add_argument('--number', required=True, help='4 位数字，如 2100')
    add_course.add_argument('--title', required=True, help='1-50 个字符')

    search = subparsers.add_parser('search', help='搜索课程（条件之间为 AND）')
    search.add_argument('--subject')
    search.add_argument('--number')
    search.add_argument('--title')

    subparsers.add_parser('browse', help='按标题列出所有课程')

    show = subparsers.add_parser('show-course', help='查看课程详情和评价')
    show.add_argument('--course-id', type=int, required=True)

    review = subparsers.add_parser('review', help='提交 / 修改 / 删除评价')
    _add_login_args(review)
    review.add_argument('--course-id', type=int, required=True)
    review.add_argument('--rating', help='1-5')
    review.add_argument('--comment')
    action = review.add_mutually_exclusive_group()
    action.add_argument('--edit', action='store_true', help='修改已有评价')
    action.add_argument('--delete', action='store_true', help='删除已有评价')

    my_reviews = subparsers.add_parser('my-reviews', help='查看我评价过的课程')
    _add_login_args(my_reviews)

    return parser.parse_args(argv)


def _add_login_args(parser):
    parser.add_argument('--username', required=True)
    parser.add_argument('--password', required=True)


def print_courses(courses):
    """打印课程列表"""
    if not courses:
        print("没有找到课程")
        return
    print(f"{'ID':>4}  {'课程':12s} {'标题':50s} 评分")
    for course in courses:
        rating = course.formatted_average_rating or "暂无评分"
        print(f"{course.id:>4}  {course.subject + ' ' + str(course.number):12s} {course.title:50s} {rating}")


def print_result(result):
    """打印操作结果，返回进程退出码"""
    if result:
        print(f"✓ {result.message or '成功'}")
        return 0
    print(f"✗ {result.message}")
    return 1


def _login(context, args):
    context.start()
    result = context.login(args.username, args.password)
    if not result:
        print_result(result)
    return result


def run(context, args):
    """执行一条命令，返回退出码"""
    if args.command == 'register':
        confirm = args.confirm_password if args.confirm_password is not None else args.password
        return print_result(context.auth.register(args.username, args.password, confirm))

    if args.command == 'add-course':
        return print_result(context.catalog.add_course(args.subject, args.number, args.title))

    if args.command == 'search':
        result = context.catalog.search_courses(args.subject, args.number, args.title)
        if not result:
            return print_result(result)
        print_courses(result.value)
        return 0

    if args.command == 'browse':
        print_courses(context.catalog.browse_courses())
        return 0

    if args.command == 'show-course':
        result = context.open_course(args.course_id)
        if not result:
            return print_result(result)
        course = result.value
        print(f"{course}")
        print(f"平均评分: {course.formatted_average_rating or '暂无评分'}")
        reviews = context.review_service.course_reviews(course.id)
        if not reviews:
            print("这门课程还没有评价")
        for review in reviews:
            print(f"  - {review.rating}/5 ({review.timestamp:%Y-%m-%d %H:%M})  {review.comment or ''}")
        return 0

    if args.command == 'review':
        if not _login(context, args):
            return 1
        context.open_course(args.course_id)
        if args.delete:
            return print_result(context.review_service.delete_review(args.course_id))
        if args.edit:
            return print_result(
                context.review_service.edit_review(args.course_id, args.rating, args.comment)
            )
        return print_result(
            context.review_service.submit_review(args.course_id, args.rating, args.comment)
        )

    if args.command == 'my-reviews':
        if not _login(context, args):
            return 1
        context.navigate(View.MY_REVIEWS)
        result = context.catalog.reviewed_courses()
        if not result:
            return print_result(result)
        if not result.value:
            print("You haven't reviewed any courses yet.")
            return 0
        print(f"{context.current_user.username}'s Reviews")
        print_courses(result.value)
        return 0

    return 0


def main(argv=None):
    """主函数"""
    args = parse_args(argv)

    # 初始化数据库
    db = Database()
    if not db.create_tables():
        print("\n数据表创建失败，程序终止")
        return 1

    if args.command == 'init-db':
        return 0 if db.test_connection() else 1

    context = AppContext(db)
    try:
        return run(context, args)
    finally:
        db.dispose()


if __name__ == "__main__":
    sys.exit(main())
