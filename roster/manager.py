# roster/manager.py
"""Модуль с классом StudentManager: коллекция студентов и ее хранение в JSON."""
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from . import config, io_utils, processing
from .errors import StudentAppError
from .models import Student, Score

logger = logging.getLogger(__name__)


class StudentManager:
    """Управляет списком студентов и сохраняет его в файл после каждого изменения."""

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        self.data_file = Path(data_file) if data_file is not None else config.DATA_FILE
        self._students: List[Student] = []
        self._ensure_data_directory()
        self.load()

    def add_student(self, student: Student) -> bool:
        """Добавляет студента. False, если студент с таким ID уже есть."""
        if not isinstance(student, Student):
            raise TypeError("Ожидается объект Student.")
        if self.find_student(student.id) is not None:
            return False

        self._students.append(student)
        self.save()
        return True

    def remove_student(self, student_id: str) -> bool:
        """Удаляет студента по ID. False, если такого студента нет."""
        student = self.find_student(student_id)
        if student is None:
            return False

        self._students.remove(student)
        self.save()
        return True

    def find_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def update_student(self, student_id: str, name: Optional[str] = None,
                       student_class: Optional[str] = None) -> bool:
        """Обновляет имя и/или класс студента.

        Применяются только переданные поля. При ошибке валидации студент
        не меняется и файл не перезаписывается.
        """
        student = self.find_student(student_id)
        if student is None:
            return False

        student.update(name=name, student_class=student_class)
        self.save()
        return True

    def add_grade(self, student_id: str, subject: str, score: Score) -> bool:
        """Добавляет или обновляет оценку студента и сохраняет изменения."""
        student = self.find_student(student_id)
        if student is None:
            return False

        student.add_grade(subject, score)
        self.save()
        return True

    def get_all_students(self) -> List[Student]:
        return list(self._students)

    def get_top_students(self, n: int) -> List[Student]:
        return processing.get_top_n_students(self._students, n)

    def get_students_by_class(self, class_name: str) -> List[Student]:
        return processing.filter_by_class(self._students, class_name)

    def get_class_statistics(self, class_name: str) -> Optional[Dict[str, Any]]:
        return processing.get_class_statistics(self._students, class_name)

    def get_class_names(self) -> List[str]:
        """Уникальные названия классов в порядке алфавита."""
        return sorted({s.student_class for s in self._students}, key=str.lower)

    def load(self):
        """Загружает студентов из файла.

        При любой ошибке список остается пустым, а не загруженным частично.
        """
        if not self.data_file.exists():
            self.save()
            return

        try:
            self._students = io_utils.read_students_from_json(self.data_file)
        except StudentAppError as e:
            logger.warning("Не удалось загрузить данные студентов: %s", e)
            self._students = []
            return
        logger.info("Загружено %d студентов из %s", len(self._students), self.data_file)

    def save(self) -> bool:
        """Перезаписывает файл снимком всех студентов.

        Ошибка записи логируется; данные в памяти не откатываются.
        """
        try:
            io_utils.write_students_to_json(self.data_file, self._students)
        except StudentAppError as e:
            logger.error("Не удалось сохранить данные студентов: %s", e)
            return False
        logger.debug("Сохранено %d студентов в %s", len(self._students), self.data_file)
        return True

    def _ensure_data_directory(self):
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Не удалось создать каталог данных %s: %s", self.data_file.parent, e)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))
