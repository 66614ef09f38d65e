"""Tests for PersonalInfoRepository: one key per field."""

from __future__ import annotations

import json

from repos.personal_info import PersonalInfo, PersonalInfoRepository


def test_defaults(info_repo):
    assert info_repo.load() == PersonalInfo(parent_name="", child_name="", gender="Male", age=3)


def test_fields_stored_independently(info_repo, store):
    info_repo.set_field("child_name", "Ada")
    assert json.loads(store.read_value("childName")) == "Ada"
    assert store.read_value("parentName") is None
    assert info_repo.get_field("child_name") == "Ada"
    assert info_repo.get_field("parent_name") == ""


def test_save_and_load(info_repo, store):
    info = PersonalInfo(parent_name="Sam", child_name="Ada", gender="Female", age=7)
    info_repo.save(info)
    assert info_repo.load() == info
    assert json.loads(store.read_value("age")) == 7
    assert json.loads(store.read_value("gender")) == "Female"


def test_no_validation_at_storage_boundary(info_repo):
    info_repo.set_field("age", 42)
    assert info_repo.get_field("age") == 42


def test_wrong_type_reads_as_default(info_repo, store):
    store.write_value("age", '"seven"')
    store.write_value("gender", "true")
    store.write_value("parentName", "{broken")
    info = info_repo.load()
    assert info.age == 3
    assert info.gender == "Male"
    assert info.parent_name == ""


def test_save_reports_failed_write(broken_store):
    repo = PersonalInfoRepository(broken_store)
    assert repo.save(PersonalInfo(parent_name="Sam")) is False
    assert repo.load() == PersonalInfo()


def test_deeply_nested_value_reads_as_default(info_repo, store):
    store.write_value("childName", "[" * 100000 + "]" * 100000)
    assert info_repo.get_field("child_name") == ""
