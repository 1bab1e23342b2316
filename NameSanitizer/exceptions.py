class NameValidationError(Exception):
    """基础命名校验异常"""
    pass

class EmptyIdentifierError(NameValidationError):
    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"名称规范化后为空: '{raw}'")
