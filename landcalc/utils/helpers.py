from datetime import datetime


class DateTimeHelper:
    @staticmethod
    def now_string(fmt="%Y-%m-%d %H:%M:%S"):
        return datetime.now().strftime(fmt)

    @staticmethod
    def file_timestamp():
        return datetime.now().strftime("%Y%m%d_%H%M%S")
