# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import logging
import sys
import traceback
from typing import Callable, Optional

from . import config, errors, io_utils
from .manager import StudentManager
from .models import Student, Score

logger = logging.getLogger(__name__)

MENU_ITEMS = [
    ("1", "Добавить нового студента"),
    ("2", "Показать всех студентов"),
    ("3", "Найти студента по ID"),
    ("4", "Обновить данные студента"),
    ("5", "Удалить студента"),
    ("6", "Добавить/обновить оценку"),
    ("7", f"Показать ТОП-{config.TOP_N} студентов"),
    ("8", "Показать студентов класса"),
    ("9", "Статистика по классу"),
    ("10", "Экспорт отчета в файл"),
    ("0", "Выход"),
]


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*35)
    print("   СИСТЕМА УПРАВЛЕНИЯ ОЦЕНКАМИ")
    print("="*35)
    for key, title in MENU_ITEMS:
        print(f"{key}. {title}")
    print("="*35)


def ask_non_empty(prompt: str, validator: Optional[Callable[[str], bool]] = None) -> str:
    """Запрашивает непустую строку, повторяя вопрос до корректного ввода."""
    while True:
        value = input(prompt).strip()
        if not value:
            print("⚠️ Ввод не может быть пустым. Попробуйте еще раз.")
            continue
        if validator is None or validator(value):
            return value


def ask_yes_no(prompt: str) -> bool:
    while True:
        answer = input(f"{prompt} (y/n): ").strip().lower()
        if answer in ("y", "n"):
            return answer == "y"
        print("⚠️ Введите y или n.")


def ask_score(prompt: str) -> Score:
    """Запрашивает оценку 0-100, пока не будет введено корректное число."""
    while True:
        raw = input(prompt).strip()
        try:
            score = float(raw)
        except ValueError:
            score = None
        if score is not None and 0 <= score <= 100:
            return int(score) if score.is_integer() else score
        print("❌ Оценка должна быть числом от 0 до 100.")


def ask_existing_student(manager: StudentManager) -> Optional[Student]:
    """Запрашивает ID и возвращает студента или None с сообщением об ошибке."""
    student_id = input("Введите ID студента: ").strip()
    if not student_id:
        print("❌ ID не может быть пустым.")
        return None
    student = manager.find_student(student_id)
    if student is None:
        print(f"❌ Студент с ID {student_id} не найден.")
    return student


def add_grades_loop(manager: StudentManager, student: Student):
    """Добавляет оценки студенту, пока пользователь не откажется."""
    while True:
        subject = ask_non_empty("Введите название предмета: ")
        score = ask_score("Введите оценку (0-100): ")
        try:
            manager.add_grade(student.id, subject, score)
            print("✅ Оценка добавлена/обновлена.")
        except errors.ValidationError as e:
            print(f"❌ Ошибка данных: {e}")
        if not ask_yes_no("Добавить еще одну оценку?"):
            break


def handle_add_student(manager: StudentManager):
    print("\n--- Добавление студента ---")

    def id_is_free(value: str) -> bool:
        if manager.find_student(value) is not None:
            print("⚠️ Этот ID уже используется. Введите другой.")
            return False
        return True

    student_id = ask_non_empty("Введите ID нового студента: ", id_is_free)
    name = ask_non_empty("Введите ФИО студента: ")
    student_class = ask_non_empty("Введите класс студента (например, 10A): ")

    student = Student(student_id, name, student_class)
    if not manager.add_student(student):
        print("❌ Не удалось добавить студента. Возможно, ID уже занят.")
        return
    print(f"✅ Студент {student.name} успешно добавлен.")
    if ask_yes_no("Добавить оценки сейчас?"):
        add_grades_loop(manager, student)


def handle_list_students(manager: StudentManager):
    students = manager.get_all_students()
    if not students:
        print("ℹ️ Список студентов пуст.")
        return
    print("\n--- Список всех студентов ---")
    for s in students:
        print(s.display_info())


def handle_find_student(manager: StudentManager):
    print("\n--- Поиск студента ---")
    student = ask_existing_student(manager)
    if student is not None:
        print(student.display_info())


def handle_update_student(manager: StudentManager):
    print("\n--- Обновление данных студента ---")
    student = ask_existing_student(manager)
    if student is None:
        return
    print("\nТекущие данные:")
    print(student.display_info())

    new_name = input("Новое имя (Enter - оставить без изменений): ").strip()
    new_class = input("Новый класс (Enter - оставить без изменений): ").strip()
    if not new_name and not new_class:
        print("ℹ️ Изменений не внесено.")
        return

    updated = manager.update_student(student.id, name=new_name or None,
                                     student_class=new_class or None)
    print("✅ Данные студента обновлены." if updated else "❌ Не удалось обновить данные студента.")


def handle_delete_student(manager: StudentManager):
    print("\n--- Удаление студента ---")
    student = ask_existing_student(manager)
    if student is None:
        return
    print(student.display_info())
    if not ask_yes_no("Вы уверены, что хотите удалить этого студента?"):
        print("ℹ️ Удаление отменено.")
        return
    removed = manager.remove_student(student.id)
    print(f"✅ Студент с ID {student.id} успешно удален." if removed else "❌ Не удалось удалить студента.")


def handle_add_grade(manager: StudentManager):
    print("\n--- Добавление оценки ---")
    student = ask_existing_student(manager)
    if student is None:
        return
    print(student.display_info())
    add_grades_loop(manager, student)


def handle_top_students(manager: StudentManager):
    top_students = manager.get_top_students(config.TOP_N)
    if not top_students:
        print("ℹ️ Список студентов пуст.")
        return
    print(f"\n--- ТОП-{config.TOP_N} студентов ---")
    for place, s in enumerate(top_students, start=1):
        print(f"Место {place}")
        print(s.display_info())


def handle_students_by_class(manager: StudentManager):
    class_name = ask_non_empty("Введите класс: ")
    students = manager.get_students_by_class(class_name)
    if not students:
        print(f"ℹ️ В классе {class_name} нет студентов.")
        return
    print(f"\n--- Студенты класса {students[0].student_class} ---")
    for s in students:
        print(s)


def handle_class_statistics(manager: StudentManager):
    class_names = manager.get_class_names()
    if class_names:
        print(f"Доступные классы: {', '.join(class_names)}")
    class_name = ask_non_empty("Введите класс: ")
    stats = manager.get_class_statistics(class_name)
    if stats is None:
        print(f"ℹ️ Класс {class_name} не найден.")
        return
    print(f"\n--- Статистика класса {stats['class']} ---")
    print(f"Студентов: {stats['student_count']}")
    print(f"Средний балл класса: {stats['average_score']:.2f}")
    print(f"Лучший средний балл: {stats['highest_average']:.2f}")
    print(f"Худший средний балл: {stats['lowest_average']:.2f}")


def handle_export_report(manager: StudentManager):
    filepath = io_utils.export_report_to_txt(manager.get_all_students())
    print(f"✅ Отчет сохранен в {filepath}.")


HANDLERS = {
    "1": handle_add_student,
    "2": handle_list_students,
    "3": handle_find_student,
    "4": handle_update_student,
    "5": handle_delete_student,
    "6": handle_add_grade,
    "7": handle_top_students,
    "8": handle_students_by_class,
    "9": handle_class_statistics,
    "10": handle_export_report,
}


def main_cli(manager: Optional[StudentManager] = None):
    """Основной цикл консольного приложения."""
    if manager is None:
        manager = StudentManager()

    print("Добро пожаловать в систему управления оценками студентов!")
    while True:
        print_menu()
        try:
            choice = input("Выберите пункт меню: ").strip()
        except EOFError:
            break

        if choice == '0':
            break

        handler = HANDLERS.get(choice)
        if handler is None:
            print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 10.")
            continue

        try:
            handler(manager)
        except EOFError:
            break
        except errors.StudentAppError as e:
            print(f"❌ Ошибка: {e}")
        except Exception as e:
            logger.exception("Непредвиденная ошибка в пункте меню %s", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")

    print("👋 До свидания!")


def run():
    """Точка входа консольной команды."""
    config.setup_logging()
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
    finally:
        if getattr(sys, 'frozen', False):
            input("\nНажмите Enter, чтобы выйти...")


if __name__ == '__main__':
    run()
