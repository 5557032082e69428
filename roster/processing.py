# roster/processing.py
"""Модуль для обработки данных: сортировка, рейтинг, фильтрация и статистика."""
from typing import List, Dict, Any, Optional

import pandas as pd

from .config import PASS_THRESHOLD
from .models import Student, round_half_up

SUMMARY_COLUMNS = ["class", "student_count", "average_score", "highest_average", "lowest_average"]


def sort_students(students: List[Student], by: str) -> List[Student]:
    """Сортирует список студентов по заданному критерию."""
    if by == 'id':
        return sorted(students, key=lambda s: s.id)
    elif by == 'name':
        return sorted(students, key=lambda s: s.name)
    elif by == 'avg':
        # По убыванию среднего балла; при равенстве сохраняется исходный порядок
        return sorted(students, key=lambda s: s.average, reverse=True)
    else:
        raise ValueError("Неверный ключ для сортировки. Доступно: 'id', 'name', 'avg'.")


def get_top_n_students(students: List[Student], n: int) -> List[Student]:
    """Возвращает N лучших студентов по среднему баллу."""
    if n <= 0:
        return []
    return sort_students(students, 'avg')[:n]


def filter_by_class(students: List[Student], class_name: str) -> List[Student]:
    """Студенты заданного класса (без учета регистра). Пустой ввод -> пустой список."""
    normalized = ("" if class_name is None else str(class_name)).strip().lower()
    if not normalized:
        return []
    return [s for s in students if s.student_class.lower() == normalized]


def get_class_statistics(students: List[Student], class_name: str) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по одному классу. None, если в классе нет студентов."""
    members = filter_by_class(students, class_name)
    if not members:
        return None

    averages = [s.average for s in members]
    return {
        "class": members[0].student_class,
        "student_count": len(members),
        "average_score": round_half_up(sum(averages) / len(averages)),
        "highest_average": max(averages),
        "lowest_average": min(averages),
    }


def get_group_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает общую статистику по всем студентам для отчета."""
    if not students:
        return None

    # Студенты без оценок не тянут общий средний балл вниз
    graded = [s.average for s in students if s.average > 0]
    overall_avg = round_half_up(sum(graded) / len(graded)) if graded else 0
    passed = sum(1 for s in students if s.average >= PASS_THRESHOLD)

    return {
        "total_students": len(students),
        "overall_average": overall_avg,
        "passed": passed,
        "failed": len(students) - passed,
    }


def get_class_summary(students: List[Student]) -> pd.DataFrame:
    """Таблица статистики по всем классам, отсортированная по названию класса."""
    if not students:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    # Группировка по названию класса как оно сохранено: "10A" и "10a" - разные строки отчета
    df = pd.DataFrame([{"class": s.student_class, "average": s.average} for s in students])
    summary = (
        df.groupby("class", sort=False)["average"]
        .agg(student_count="size", average_score="mean",
             highest_average="max", lowest_average="min")
        .reset_index()
    )
    summary["average_score"] = summary["average_score"].map(round_half_up)
    summary = summary.sort_values("class", key=lambda col: col.str.lower(), kind="stable")
    return summary.reset_index(drop=True)[SUMMARY_COLUMNS]
