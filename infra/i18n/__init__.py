from .json_message_catalog import JsonMessageCatalog

__all__ = ["JsonMessageCatalog"]
