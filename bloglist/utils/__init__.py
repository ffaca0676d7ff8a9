from bloglist.utils.helpers import host, time_taken, today_str
from bloglist.utils.list_helper import favourite_blog, total_likes

__all__ = ["favourite_blog", "host", "time_taken", "today_str", "total_likes"]
