from bloglist.main import app

__all__ = ["app"]
