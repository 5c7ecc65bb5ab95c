from app.db.models.user import NIL_ID, UserEntity

__all__ = ["NIL_ID", "UserEntity"]
