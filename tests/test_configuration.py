from __future__ import annotations

import io
from pathlib import Path

import pytest

from docspell.configuration import (
    DEFAULT_CONFIG_FILENAME,
    SpellcheckSettings,
    default_language,
    default_personal_wordlist,
    load_settings_file,
    read_wordlist,
    resolve_settings,
)
from docspell.errors import InputValidationError, WordlistError
from docspell.spelling import SuggestionMode


@pytest.mark.parametrize(
    ("lang", "expected"),
    [
        ("en_US.UTF-8", "en"),
        ("de_DE", "de"),
        ("fr", "fr"),
        ("C", "en"),
        ("POSIX", "en"),
        ("", "en"),
    ],
)
def test_default_language_from_lang(lang: str, expected: str) -> None:
    assert default_language({"LANG": lang}) == expected


def test_default_language_without_lang() -> None:
    assert default_language({}) == "en"


def test_default_personal_wordlist_is_per_language() -> None:
    path = default_personal_wordlist("de")
    assert path.name == "personal.de.pws"


def test_resolve_settings_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    settings = resolve_settings(environ={"LANG": "en_GB.UTF-8"})

    assert isinstance(settings, SpellcheckSettings)
    assert settings.language == "en"
    assert settings.suggestion_mode is SuggestionMode.NORMAL
    assert settings.run_together is True
    assert settings.personal_wordlist == default_personal_wordlist("en")
    assert settings.extra_words == ()
    assert settings.add_words is None
    assert settings.sources == ()


def test_resolve_settings_cli_overrides_file(tmp_path: Path) -> None:
    config = tmp_path / "docspell.yaml"
    config.write_text(
        "language: de\n"
        "suggestion_mode: fast\n"
        "run_together: false\n"
        "personal_wordlist: words.pws\n"
        "words: [rubygems, yaml]\n",
        encoding="utf-8",
    )

    from_file = resolve_settings(config_path=config, environ={})
    overridden = resolve_settings(
        language="es",
        suggestion_mode=SuggestionMode.SLOW,
        run_together=True,
        config_path=config,
        environ={},
    )

    assert from_file.language == "de"
    assert from_file.suggestion_mode is SuggestionMode.FAST
    assert from_file.run_together is False
    assert from_file.personal_wordlist == Path("words.pws")
    assert from_file.extra_words == ("rubygems", "yaml")
    assert from_file.sources == (config,)
    assert overridden.language == "es"
    assert overridden.suggestion_mode is SuggestionMode.SLOW
    assert overridden.run_together is True


def test_resolve_settings_discovers_working_directory_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("language: pt\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = resolve_settings(environ={})

    assert settings.language == "pt"
    assert settings.sources == (tmp_path / DEFAULT_CONFIG_FILENAME,)


def test_resolve_settings_keeps_add_words(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    settings = resolve_settings(add_words=["rdoc", "ri"], highlight=False, environ={})

    assert settings.add_words == ("rdoc", "ri")
    assert settings.highlight is False


def test_load_settings_file_rejects_unknown_keys(tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("language: en\ncolour: red\n", encoding="utf-8")

    with pytest.raises(InputValidationError) as excinfo:
        load_settings_file(config)

    assert "colour" in excinfo.value.message


def test_load_settings_file_rejects_invalid_yaml(tmp_path: Path) -> None:
    config = tmp_path / "broken.yaml"
    config.write_text("language: [en\n", encoding="utf-8")

    with pytest.raises(InputValidationError):
        load_settings_file(config)


def test_load_settings_file_requires_mapping(tmp_path: Path) -> None:
    config = tmp_path / "list.yaml"
    config.write_text("- en\n- de\n", encoding="utf-8")

    with pytest.raises(InputValidationError):
        load_settings_file(config)


def test_load_settings_file_empty_is_empty_mapping(tmp_path: Path) -> None:
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")

    assert load_settings_file(config) == {}


def test_resolve_settings_rejects_unknown_suggestion_mode(tmp_path: Path) -> None:
    config = tmp_path / "mode.yaml"
    config.write_text("suggestion_mode: psychic\n", encoding="utf-8")

    with pytest.raises(InputValidationError) as excinfo:
        resolve_settings(config_path=config, environ={})

    assert "bad-spellers" in (excinfo.value.remediation or "")


def test_resolve_settings_rejects_scalar_words(tmp_path: Path) -> None:
    config = tmp_path / "words.yaml"
    config.write_text("words: rubygems\n", encoding="utf-8")

    with pytest.raises(InputValidationError):
        resolve_settings(config_path=config, environ={})


def test_read_wordlist_inline_list() -> None:
    assert read_wordlist("rdoc, ri,,gemspec", io.StringIO()) == ["rdoc", "ri", "gemspec"]


def test_read_wordlist_from_file(tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    words.write_text("rdoc\nri  gemspec\n", encoding="utf-8")

    assert read_wordlist(str(words), io.StringIO()) == ["rdoc", "ri", "gemspec"]


def test_read_wordlist_from_stdin() -> None:
    assert read_wordlist(None, io.StringIO("rdoc ri\ngemspec\n")) == ["rdoc", "ri", "gemspec"]


def test_read_wordlist_missing_file(tmp_path: Path) -> None:
    with pytest.raises(WordlistError):
        read_wordlist(str(tmp_path / "nope.txt"), io.StringIO())


@pytest.mark.parametrize("value", ['"false"', "'no'", "0", "null"])
def test_resolve_settings_rejects_non_boolean_run_together(tmp_path: Path, value: str) -> None:
    config = tmp_path / "run_together.yaml"
    config.write_text(f"run_together: {value}\n", encoding="utf-8")

    with pytest.raises(InputValidationError) as excinfo:
        resolve_settings(config_path=config, environ={})

    assert "run_together" in excinfo.value.message


def test_resolve_settings_accepts_yaml_boolean_run_together(tmp_path: Path) -> None:
    config = tmp_path / "run_together.yaml"
    config.write_text("run_together: off\n", encoding="utf-8")

    assert resolve_settings(config_path=config, environ={}).run_together is False
