from objtasks.model.rectangle import Rectangle

__all__ = ["Rectangle"]
