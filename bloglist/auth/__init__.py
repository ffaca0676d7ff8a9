from bloglist.auth.ownership import authorize_delete, is_owner

__all__ = ["authorize_delete", "is_owner"]
