import dataclasses

import pytest

from impsort import ClassifiedGroup, ConfigurationError, GroupConfiguration, ImportDeclaration, PatternSpec
from impsort.errors import ImpsortUserError


def test_compile_keeps_group_order():
    cfg = GroupConfiguration.compile([["^b"], ["^a"]])
    assert [r.index for r in cfg.rules] == [0, 1]
    assert [r.patterns[0].source for r in cfg.rules] == ["^b", "^a"]
    assert cfg.catch_all_index == 2


def test_compile_accepts_mixed_pattern_forms():
    cfg = GroupConfiguration.compile([
        [{"pattern": ".*", "type_only": True}],
        ["^react", PatternSpec("^vue")],
    ])
    assert cfg.rules[0].patterns == (PatternSpec(".*", type_only=True),)
    assert cfg.rules[1].patterns == (PatternSpec("^react"), PatternSpec("^vue"))
    assert cfg.to_list() == [[{"pattern": ".*", "type_only": True}], ["^react", "^vue"]]


def test_invalid_regex_names_group_and_pattern():
    with pytest.raises(ConfigurationError) as ei:
        GroupConfiguration.compile([["^ok"], ["^fine", "^(broken"]])
    err = ei.value
    assert err.group_index == 1
    assert err.pattern == "^(broken"
    assert "groups[1]" in str(err)
    assert "^(broken" in str(err)


def test_configuration_error_is_user_error():
    assert issubclass(ConfigurationError, ImpsortUserError)


@pytest.mark.parametrize("groups", [[], "^react", None, {"a": ["^a"]}])
def test_rejects_malformed_group_list(groups):
    with pytest.raises(ConfigurationError):
        GroupConfiguration.compile(groups)


def test_rejects_empty_group():
    with pytest.raises(ConfigurationError) as ei:
        GroupConfiguration.compile([["^a"], []])
    assert ei.value.group_index == 1


def test_rejects_string_group():
    with pytest.raises(ConfigurationError) as ei:
        GroupConfiguration.compile([["^a"], "^b"])
    assert ei.value.group_index == 1


@pytest.mark.parametrize("item", [42, {"type_only": True}, {"pattern": "^a", "typeOnly": True}])
def test_rejects_bad_pattern_items(item):
    with pytest.raises(ConfigurationError) as ei:
        GroupConfiguration.compile([[item]])
    assert ei.value.group_index == 0


def test_patterns_compiled_once():
    cfg = GroupConfiguration.compile([["^react"]])
    compiled = cfg.rules[0].compiled
    cfg.rules[0].matches(ImportDeclaration("react"))
    assert cfg.rules[0].compiled is compiled


def test_rendered_falls_back_to_raw_text():
    assert ImportDeclaration("react").rendered == "react"
    assert ImportDeclaration(None).rendered == ""
    assert ImportDeclaration("react", text="import 'react';").rendered == "import 'react';"


def test_classified_group_is_a_frozen_value():
    group = ClassifiedGroup(index=0, declarations=())
    assert group == ClassifiedGroup(index=0, declarations=())
    assert group.declarations == ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.index = 1
