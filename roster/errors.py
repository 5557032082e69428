# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class ValidationError(StudentAppError, ValueError):
    """Некорректные ID, имя, класс, предмет или оценка студента."""
    pass

class DataValidationError(ValidationError):
    """Исключение, связанное с некорректными данными в файле."""
    pass

class FileProcessingError(StudentAppError):
    """Исключение, связанное с ошибками файловых операций."""
    pass
