# tests/conftest.py
import pytest
from typing import List
from roster.manager import StudentManager
from roster.models import Student

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("S001", "Иванов Иван", "10A", {"Математика": 78, "Физика": 85, "Химия": 90}),
        Student("S002", "Петров Петр", "10B", {"Математика": 92, "Физика": 88, "Химия": 95}),
        Student("S003", "Сидорова Анна", "10A", {"Математика": 65, "Физика": 70}),
    ]

@pytest.fixture
def data_file(tmp_path):
    """Путь к файлу данных во временном каталоге (каталог еще не создан)."""
    return tmp_path / "data" / "students.json"

@pytest.fixture
def manager(data_file) -> StudentManager:
    """Пустой менеджер, сохраняющий данные во временный файл."""
    return StudentManager(data_file)
