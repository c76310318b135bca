from .uid_factory import REV_FORMAT, generate_rev, generate_uid

__all__ = ["REV_FORMAT", "generate_rev", "generate_uid"]
