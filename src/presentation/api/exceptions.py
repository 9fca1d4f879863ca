"""API Layer Exceptions"""


class InvalidPayloadError(Exception):
    """リクエストボディが Movie として解釈できないエラー"""

    pass


class InvalidPageError(Exception):
    """page クエリパラメータが正の整数でないエラー"""

    def __init__(self, raw_value: str):
        super().__init__(f"Invalid page parameter: {raw_value!r}")
        self.raw_value = raw_value


class MethodNotAllowedError(Exception):
    """サポートしていない HTTP メソッド"""

    def __init__(self, method: str):
        super().__init__(f"Method not allowed: {method}")
        self.method = method
