from cloudcode_proxy.session.session_id import SESSION_ID_LENGTH, derive_session_id

__all__ = ["SESSION_ID_LENGTH", "derive_session_id"]
