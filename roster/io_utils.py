# roster/io_utils.py
"""Модуль для операций ввода/вывода: JSON-снимок студентов и текстовый отчет."""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from . import config
from .errors import FileProcessingError, DataValidationError, ValidationError
from .models import Student
from .processing import get_group_statistics, get_class_summary

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_students_from_json(filepath: PathLike) -> List[Student]:
    """Читает снимок студентов из JSON-файла.

    Любая некорректная запись делает невалидным весь файл: частичная
    загрузка не допускается.
    """
    try:
        with open(filepath, mode='r', encoding='utf-8') as file:
            raw = file.read()
    except FileNotFoundError:
        raise FileProcessingError(f"Файл не найден по пути: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")

    if not raw.strip():
        return []  # Пустой файл

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError и слишком длинные числа - подклассы ValueError
        raise FileProcessingError(f"Файл {filepath} не является корректным JSON: {e}")

    if not isinstance(data, list):
        raise DataValidationError(f"Файл {filepath} должен содержать JSON-массив студентов.")

    students = []
    seen_ids = set()
    for index, record in enumerate(data):
        try:
            student = Student.from_dict(record)
        except ValidationError as e:
            raise DataValidationError(f"Ошибка в записи {index}: {record}. Детали: {e}")
        if student.id in seen_ids:
            raise DataValidationError(f"Ошибка в записи {index}: ID {student.id} встречается повторно.")
        seen_ids.add(student.id)
        students.append(student)
    return students


def write_students_to_json(filepath: PathLike, students: List[Student]):
    """Полностью перезаписывает JSON-файл снимком всех студентов."""
    payload = json.dumps([s.to_dict() for s in students], ensure_ascii=False, indent=2)
    try:
        with open(filepath, mode='w', encoding='utf-8') as file:
            file.write(payload)
    except OSError as e:
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")


def build_report(students: List[Student], now: datetime) -> str:
    """Формирует текст отчета по всем студентам."""
    lines = [
        "=" * 40,
        "ОТЧЕТ ПО УСПЕВАЕМОСТИ СТУДЕНТОВ",
        "=" * 40,
        f"Сформирован: {now.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Всего студентов: {len(students)}",
        "",
    ]

    stats = get_group_statistics(students)
    lines.append("--- Общая статистика ---")
    if stats is None:
        lines.append("Нет данных.")
    else:
        lines.append(f"Средний балл (без студентов без оценок): {stats['overall_average']:.2f}")
        lines.append(f"Сдали (средний балл >= {config.PASS_THRESHOLD}): {stats['passed']}")
        lines.append(f"Не сдали: {stats['failed']}")
    lines.append("")

    lines.append("--- Статистика по классам ---")
    summary = get_class_summary(students)
    if summary.empty:
        lines.append("Нет данных.")
    for row in summary.itertuples(index=False):
        lines.append(
            f"Класс {row[0]}: студентов {row.student_count}, "
            f"средний балл {row.average_score:.2f}, "
            f"лучший {row.highest_average:.2f}, худший {row.lowest_average:.2f}"
        )
    lines.append("")

    lines.append("--- Студенты ---")
    for s in students:
        lines.append(s.display_info())
    return "\n".join(lines) + "\n"


def export_report_to_txt(students: List[Student], reports_dir: Optional[PathLike] = None,
                         now: Optional[datetime] = None) -> Path:
    """Сохраняет отчет в файл с меткой времени и возвращает путь к нему."""
    now = now or datetime.now()
    target_dir = Path(reports_dir) if reports_dir is not None else config.REPORTS_DIR
    filepath = target_dir / f"report_{now.strftime('%Y%m%d_%H%M%S')}.txt"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        with open(filepath, mode='w', encoding='utf-8') as file:
            file.write(build_report(students, now))
    except OSError as e:
        raise FileProcessingError(f"Ошибка экспорта отчета в {filepath}: {e}")
    logger.info("Отчет сохранен: %s", filepath)
    return filepath
