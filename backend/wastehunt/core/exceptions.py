# wastehunt/core/exceptions.py
from fastapi import status


class AppException(Exception):
    """Базовое исключение приложения, несёт HTTP статус и текст для клиента"""
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class AuthenticationError(AppException):
    """Ошибка аутентификации"""
    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, detail)


class AuthorizationError(AppException):
    """Недостаточно прав"""
    def __init__(self, detail: str = "Not authorized"):
        super().__init__(status.HTTP_403_FORBIDDEN, detail)


class ValidationError(AppException):
    """Ошибка валидации данных"""
    def __init__(self, detail: str = "Validation error"):
        super().__init__(422, detail)


class NotFoundError(AppException):
    """Ресурс не найден"""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")


class ReportNotFoundError(NotFoundError):
    def __init__(self, report_id: int):
        super().__init__(f"Waste report {report_id} not found")


class TipNotFoundError(NotFoundError):
    def __init__(self, tip_id: int):
        super().__init__(f"Tip {tip_id} not found")


class DatabaseError(AppException):
    """Сбой хранилища: соединение, ограничение, таймаут. Повторов не делаем"""
    def __init__(self, detail: str = "Database error"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)


class RateLimitError(AppException):
    """Превышен лимит запросов"""
    def __init__(self, detail: str = "Too many requests"):
        super().__init__(status.HTTP_429_TOO_MANY_REQUESTS, detail)
