from .markup import script_tags, style_tags

__all__ = ["script_tags", "style_tags"]
