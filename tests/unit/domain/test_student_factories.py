"""Tests for Student and AdmissionYear static factories."""

import threading
from datetime import date

import pytest

from creational.domain.core.exceptions import ValidationError
from creational.domain.student import AdmissionYear, Student


@pytest.mark.unit
class TestAdmissionYear:
    """Test cases for the caching AdmissionYear factory."""

    def test_of_shares_instances_inside_window(self):
        assert AdmissionYear.of(2020) is AdmissionYear.of(2020)

    def test_of_creates_fresh_instances_outside_window(self):
        first = AdmissionYear.of(1950)
        second = AdmissionYear.of(1950)

        assert first == second
        assert first is not second

    def test_constructor_never_shares(self):
        assert AdmissionYear(2020) is not AdmissionYear.of(2020)
        assert AdmissionYear(2020) == AdmissionYear.of(2020)

    def test_configure_cache_moves_window(self):
        AdmissionYear.configure_cache(1940, 1960)

        assert AdmissionYear.of(1950) is AdmissionYear.of(1950)
        assert AdmissionYear.of(2020) is not AdmissionYear.of(2020)
        assert AdmissionYear.cache_window() == (1940, 1960)

    def test_configure_cache_rejects_empty_window(self):
        with pytest.raises(ValidationError):
            AdmissionYear.configure_cache(2000, 1990)

    def test_configure_cache_rejects_out_of_range_window(self):
        with pytest.raises(ValidationError):
            AdmissionYear.configure_cache(1800, 2000)

    def test_clear_cache_drops_shared_instances(self):
        before = AdmissionYear.of(2021)
        AdmissionYear.clear_cache()

        assert AdmissionYear.of(2021) is not before

    @pytest.mark.parametrize("year", [1899, 2101, "2020", 2020.0, True])
    def test_invalid_years(self, year):
        with pytest.raises(ValidationError):
            AdmissionYear.of(year)

    def test_concurrent_first_use_creates_one_instance(self):
        AdmissionYear.clear_cache()
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(AdmissionYear.of(2010))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)


@pytest.mark.unit
class TestStudentFactories:
    """Test cases for Student named constructors."""

    def test_of_returns_fresh_students_with_shared_year(self):
        first = Student.of("Ada Lovelace", 2020)
        second = Student.of("Ada Lovelace", 2020)

        assert first == second
        assert first is not second
        assert first.admission_year is second.admission_year
        assert first.admission_year is AdmissionYear.of(2020)

    def test_of_accepts_admission_year(self):
        year = AdmissionYear(2022)

        student = Student.of("Grace Hopper", year)

        assert student.admission_year is year

    def test_new_instance_never_shares_year(self):
        student = Student.new_instance("Grace Hopper", 2020)

        assert student.admission_year == AdmissionYear.of(2020)
        assert student.admission_year is not AdmissionYear.of(2020)

    def test_from_record(self):
        student = Student.from_record("Alan Turing:2019")

        assert student.name == "Alan Turing"
        assert student.admission_year.value == 2019
        assert student.to_record() == "Alan Turing:2019"

    @pytest.mark.parametrize("record", ["Alan Turing", "Alan Turing:", "Alan:20x9", ":2019", "Alan:1800", "Ada:²"])
    def test_from_record_rejects_malformed(self, record):
        with pytest.raises(ValidationError):
            Student.from_record(record)

    def test_name_is_stripped(self):
        assert Student.of("  Ada  ", 2020).name == "Ada"

    @pytest.mark.parametrize("name", ["", "   ", "a:b"])
    def test_invalid_names(self, name):
        with pytest.raises(ValidationError, match="name"):
            Student.of(name, 2020)

    def test_create_freshman(self):
        student = Student.create_freshman("Barbara Liskov", today=date(2024, 9, 1))

        assert student.admission_year.value == 2024

    def test_years_enrolled(self):
        assert Student.of("Ada", 2020).years_enrolled(2024) == 4

    def test_student_is_immutable(self):
        student = Student.of("Ada", 2020)

        with pytest.raises(Exception):
            student.name = "Grace"

    def test_model_copy_keeps_shared_year(self):
        student = Student.of("Ada", 2020)

        copy = student.model_copy(update={"name": "Grace"})

        assert copy.name == "Grace"
        assert copy.admission_year is AdmissionYear.of(2020)

    def test_model_copy_validates_updates(self):
        student = Student.of("Ada", 2020)

        with pytest.raises(ValidationError, match="name"):
            student.model_copy(update={"name": "   "})
