# roster/models.py
"""Модуль, определяющий основную модель данных Student."""
import math
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Any, Dict, Optional, Union

from .config import PASS_THRESHOLD
from .errors import ValidationError

Score = Union[int, float]

STATUS_PASS = "pass"
STATUS_FAIL = "fail"


def _normalize_text(value: Any) -> str:
    """Приводит значение к строке без пробелов по краям (None -> '')."""
    if value is None:
        return ""
    return str(value).strip()


def round_half_up(value: float) -> float:
    """Округляет до 2 знаков, половину - вверх (75.125 -> 75.13)."""
    return float(Decimal(str(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _require_text(value: Any, message: str) -> str:
    text = _normalize_text(value)
    if not text:
        raise ValidationError(message)
    return text


def _parse_score(score: Any) -> Score:
    """Проверяет оценку: конечное число в диапазоне 0-100."""
    if isinstance(score, bool):
        raise ValidationError("Оценка должна быть числом от 0 до 100.")
    if isinstance(score, str):
        try:
            score = float(score.strip())
        except ValueError:
            raise ValidationError(f"Оценка '{score}' должна быть числом от 0 до 100.")
    if not isinstance(score, Real):
        raise ValidationError(f"Оценка '{score}' должна быть числом от 0 до 100.")
    # Диапазон проверяется до isfinite: огромные int не переводятся во float
    if score < 0 or score > 100 or not math.isfinite(score):
        raise ValidationError(f"Оценка {score} недопустима. Разрешен диапазон 0-100.")
    return score


class Student:
    """Представляет студента с его ID, именем, классом и оценками по предметам."""

    def __init__(self, student_id: Union[str, int], name: str, student_class: str,
                 grades: Optional[Dict[str, Score]] = None):
        self._id = _require_text(student_id, "ID студента не может быть пустым.")
        self._name = _require_text(name, "Имя студента не может быть пустым.")
        self._class = _require_text(student_class, "Класс студента не может быть пустым.")

        if grades is None:
            grades = {}
        if not isinstance(grades, Mapping):
            raise ValidationError("Оценки должны быть словарем 'предмет -> балл'.")

        # Каждая оценка проходит ту же проверку, что и add_grade.
        # Если хоть одна плохая - ошибка.
        self._grades: Dict[str, Score] = {}
        for subject, score in grades.items():
            self.add_grade(subject, score)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = _require_text(value, "Имя студента не может быть пустым.")

    @property
    def student_class(self) -> str:
        return self._class

    @student_class.setter
    def student_class(self, value: str):
        self._class = _require_text(value, "Класс студента не может быть пустым.")

    def update(self, name: Optional[str] = None, student_class: Optional[str] = None):
        """Меняет имя и/или класс: сначала проверяются все поля, потом присваиваются."""
        new_name = self._name if name is None else _require_text(name, "Имя студента не может быть пустым.")
        new_class = (self._class if student_class is None
                     else _require_text(student_class, "Класс студента не может быть пустым."))
        self._name = new_name
        self._class = new_class

    @property
    def grades(self) -> Dict[str, Score]:
        """Копия словаря оценок; изменение копии не влияет на студента."""
        return dict(self._grades)

    def add_grade(self, subject: str, score: Score):
        """Добавляет или перезаписывает оценку по предмету."""
        normalized_subject = _require_text(subject, "Название предмета не может быть пустым.")
        self._grades[normalized_subject] = _parse_score(score)

    def get_average(self) -> float:
        """Средний балл, округленный до 2 знаков. Возвращает 0, если оценок нет."""
        if not self._grades:
            return 0
        return round_half_up(sum(self._grades.values()) / len(self._grades))

    @property
    def average(self) -> float:
        return self.get_average()

    def get_grade_status(self) -> str:
        """'pass', если средний балл не ниже порога, иначе 'fail'."""
        return STATUS_PASS if self.get_average() >= PASS_THRESHOLD else STATUS_FAIL

    def to_dict(self) -> Dict[str, Any]:
        """Снимок студента для сохранения в JSON."""
        return {
            "id": self._id,
            "name": self._name,
            "class": self._class,
            "grades": dict(self._grades),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Student":
        """Восстанавливает студента из снимка, проверяя все поля заново."""
        if not isinstance(data, Mapping):
            raise ValidationError("Запись студента должна быть объектом.")
        try:
            return cls(data["id"], data["name"], data["class"], data.get("grades"))
        except KeyError as e:
            raise ValidationError(f"В записи студента отсутствует поле {e}.")

    def display_info(self) -> str:
        """Возвращает подробную карточку студента для вывода в консоль."""
        lines = [
            f"ID: {self._id}",
            f"Имя: {self._name}",
            f"Класс: {self._class}",
            "Предметы:",
        ]
        if not self._grades:
            lines.append("  (Нет оценок)")
        else:
            lines.extend(f"  - {subject}: {score}" for subject, score in self._grades.items())
        lines.append(f"Средний балл: {self.get_average():.2f}")
        lines.append(f"Статус: {self.get_grade_status()}")
        lines.append("-" * 24)
        return "\n".join(lines)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id='{self._id}', name='{self._name}', class='{self._class}', average={self.average:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        grades_str = ", ".join(f"{s}: {g}" for s, g in self._grades.items()) if self._grades else "Нет оценок"
        return (f"ID: {self._id:<6} | Имя: {self._name:<20} | Класс: {self._class:<5} | "
                f"Средний балл: {self.average:<6.2f} | Оценки: [{grades_str}]")
