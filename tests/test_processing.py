# tests/test_processing.py
import pytest
from roster.models import Student
from roster.processing import (
    sort_students, get_top_n_students, filter_by_class, get_class_statistics,
    get_group_statistics, get_class_summary,
)

@pytest.fixture
def ranked_students():
    """Пять студентов со средними баллами 70, 90, 50, 80, 60."""
    return [
        Student(str(i), f"Студент {i}", "10A", {"A": avg})
        for i, avg in enumerate([70, 90, 50, 80, 60], start=1)
    ]

def test_sort_students_by_id(sample_students):
    sorted_list = sort_students(sample_students, 'id')
    assert [s.id for s in sorted_list] == ["S001", "S002", "S003"]

def test_sort_students_by_name(sample_students):
    sorted_list = sort_students(sample_students, 'name')
    assert [s.name for s in sorted_list] == ["Иванов Иван", "Петров Петр", "Сидорова Анна"]

def test_sort_students_by_avg(sample_students):
    sorted_list = sort_students(sample_students, 'avg')
    assert [s.id for s in sorted_list] == ["S002", "S001", "S003"] # 91.67, 84.33, 67.5

def test_sort_students_unknown_key(sample_students):
    with pytest.raises(ValueError):
        sort_students(sample_students, 'age')

def test_top_three(ranked_students):
    top = get_top_n_students(ranked_students, 3)
    assert [s.average for s in top] == [90, 80, 70]

def test_top_zero_and_negative(ranked_students):
    assert get_top_n_students(ranked_students, 0) == []
    assert get_top_n_students(ranked_students, -2) == []

def test_top_more_than_population(ranked_students):
    top = get_top_n_students(ranked_students, 10)
    assert [s.average for s in top] == [90, 80, 70, 60, 50]

def test_top_is_stable_for_equal_averages():
    students = [Student(sid, sid, "10A", {"A": 80}) for sid in ("b", "a", "c")]
    assert [s.id for s in get_top_n_students(students, 3)] == ["b", "a", "c"]

def test_top_does_not_reorder_input(ranked_students):
    get_top_n_students(ranked_students, 3)
    assert [s.id for s in ranked_students] == ["1", "2", "3", "4", "5"]

def test_filter_by_class_is_case_insensitive(sample_students):
    found = filter_by_class(sample_students, " 10a ")
    assert [s.id for s in found] == ["S001", "S003"]

def test_filter_by_blank_class(sample_students):
    assert filter_by_class(sample_students, "  ") == []
    assert filter_by_class(sample_students, None) == []

def test_get_class_statistics():
    students = [
        Student("1", "Первый", "10A", {"A": 80}),
        Student("2", "Второй", "10a", {"A": 90}),
        Student("3", "Третий", "11B", {"A": 40}),
    ]
    stats = get_class_statistics(students, "10A")
    assert stats == {
        "class": "10A",
        "student_count": 2,
        "average_score": 85.00,
        "highest_average": 90,
        "lowest_average": 80,
    }

def test_get_class_statistics_not_found(sample_students):
    assert get_class_statistics(sample_students, "12Z") is None

def test_get_group_statistics(sample_students):
    sample_students.append(Student("S004", "Без оценок", "10B"))
    stats = get_group_statistics(sample_students)
    assert stats["total_students"] == 4
    assert stats["passed"] == 2
    assert stats["failed"] == 2
    # Студент без оценок не учитывается в среднем
    assert stats["overall_average"] == pytest.approx(81.17, abs=0.01)

def test_get_group_statistics_empty():
    assert get_group_statistics([]) is None

def test_get_class_summary(sample_students):
    sample_students.append(Student("S004", "Орлова Ольга", "9C", {"A": 60}))
    summary = get_class_summary(sample_students)
    assert list(summary["class"]) == ["10A", "10B", "9C"]
    assert list(summary["student_count"]) == [2, 1, 1]
    row = summary.iloc[0]
    assert row["average_score"] == pytest.approx(75.915, abs=0.01)
    assert row["highest_average"] == pytest.approx(84.33)
    assert row["lowest_average"] == pytest.approx(67.5)

def test_get_class_summary_empty():
    summary = get_class_summary([])
    assert summary.empty
    assert "average_score" in summary.columns

def test_filter_by_numeric_class_name():
    students = [Student("1", "Первый", "10", {"A": 80})]
    assert [s.id for s in filter_by_class(students, 10)] == ["1"]

def test_class_statistics_round_half_up():
    students = [
        Student("1", "Первый", "10A", {"A": 80.25}),
        Student("2", "Второй", "10A", {"A": 80}),
    ]
    assert get_class_statistics(students, "10A")["average_score"] == 80.13
    assert get_class_summary(students).iloc[0]["average_score"] == 80.13
    assert get_group_statistics(students)["overall_average"] == 80.13
