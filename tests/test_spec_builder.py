"""Unit tests for answer validation and normalization (lwc_scaffold.spec_builder)."""

from __future__ import annotations

import pytest

from lwc_scaffold.errors import (
    EmptyComponentName,
    InvalidComponentName,
    InvalidNameCase,
    NameCollision,
    ScaffoldError,
    UnknownNamespace,
)
from lwc_scaffold.models import LanguageVariant
from lwc_scaffold.spec_builder import build_spec

pytestmark = pytest.mark.unit


@pytest.fixture
def modules_dir(project_root):
    return project_root / "src" / "modules"


def _build(answers, modules_dir, namespaces=("base",), variant=LanguageVariant.SCRIPT):
    return build_spec(answers, list(namespaces), variant, modules_dir)


class TestValidAnswers:
    def test_plain_name(self, modules_dir):
        spec = _build({"component": "myButton", "css": True, "unit": True, "wdio": False}, modules_dir)
        assert spec.namespace == "base"
        assert spec.raw_name == "myButton"
        assert spec.normalized_name == "myButton"
        assert spec.include_css is True
        assert spec.include_unit_test is True
        assert spec.include_wdio_test is False
        assert spec.language_variant is LanguageVariant.SCRIPT
        assert spec.was_normalized is False

    def test_sole_namespace_used_without_answer(self, modules_dir):
        spec = _build({"component": "card"}, modules_dir)
        assert spec.namespace == "base"

    def test_chosen_namespace(self, make_project):
        root = make_project(["base", "ui"])
        spec = _build({"namespace": "ui", "component": "card"}, root / "src" / "modules", ["base", "ui"])
        assert spec.namespace == "ui"

    def test_hyphenated_name_is_normalized(self, modules_dir):
        spec = _build({"component": "my-thing"}, modules_dir)
        assert spec.raw_name == "my-thing"
        assert spec.normalized_name == "myThing"
        assert spec.was_normalized is True
        assert spec.tag == "base-my-thing"

    def test_missing_flags_use_question_defaults(self, modules_dir):
        spec = _build({"component": "card"}, modules_dir)
        assert spec.include_css is True
        assert spec.include_unit_test is False
        assert spec.include_wdio_test is False

    def test_variant_is_carried(self, modules_dir):
        spec = _build({"component": "card"}, modules_dir, variant=LanguageVariant.TYPED)
        assert spec.extension == "ts"

    def test_derived_names(self, modules_dir):
        spec = _build({"component": "myButton"}, modules_dir)
        assert spec.class_name == "MyButton"
        assert spec.import_name == "BaseMyButton"
        assert spec.tag == "base-my-button"
        assert spec.component_dir(modules_dir) == modules_dir / "base" / "myButton"


class TestInvalidAnswers:
    def test_empty_name(self, modules_dir):
        with pytest.raises(EmptyComponentName):
            _build({"component": ""}, modules_dir)

    def test_missing_name_counts_as_empty(self, modules_dir):
        with pytest.raises(EmptyComponentName):
            _build({}, modules_dir)

    def test_uppercase_start(self, modules_dir):
        with pytest.raises(InvalidNameCase):
            _build({"component": "MyButton"}, modules_dir)

    def test_case_checked_before_hyphens(self, modules_dir):
        with pytest.raises(InvalidNameCase) as exc_info:
            _build({"component": "My-Thing"}, modules_dir)
        assert exc_info.value.name == "My-Thing"

    def test_leading_hyphen_rejected(self, modules_dir):
        with pytest.raises(InvalidNameCase):
            _build({"component": "-thing"}, modules_dir)

    def test_leading_digit_rejected(self, modules_dir):
        with pytest.raises(InvalidNameCase) as exc_info:
            _build({"component": "1abc"}, modules_dir)
        assert exc_info.value.name == "1abc"

    @pytest.mark.parametrize(
        "name",
        ["card/inner", "card\\inner", "my card", "my.card", "my_card", "card/../../x"],
    )
    def test_non_identifier_characters_rejected(self, modules_dir, name):
        with pytest.raises(InvalidComponentName) as exc_info:
            _build({"component": name}, modules_dir)
        assert exc_info.value.name == name

    def test_hyphens_and_digits_allowed(self, modules_dir):
        spec = _build({"component": "card-2col-v3"}, modules_dir)
        assert spec.normalized_name == "card2colV3"

    def test_collision(self, modules_dir):
        (modules_dir / "base" / "myButton").mkdir()
        with pytest.raises(NameCollision) as exc_info:
            _build({"component": "myButton"}, modules_dir)
        assert exc_info.value.target == modules_dir / "base" / "myButton"

    def test_collision_checked_on_normalized_name(self, modules_dir):
        (modules_dir / "base" / "myThing").mkdir()
        with pytest.raises(NameCollision):
            _build({"component": "my-thing"}, modules_dir)

    def test_unknown_namespace(self, modules_dir):
        with pytest.raises(UnknownNamespace):
            _build({"namespace": "nope", "component": "card"}, modules_dir)

    @pytest.mark.parametrize("name", ["", "Bad", "myButton", "1abc", "myButton/inner"])
    def test_failures_write_nothing(self, modules_dir, snapshot_tree, name):
        (modules_dir / "base" / "myButton").mkdir()
        before = snapshot_tree(modules_dir)
        with pytest.raises(ScaffoldError):
            _build({"component": name}, modules_dir)
        assert snapshot_tree(modules_dir) == before
