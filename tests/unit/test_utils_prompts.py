"""Tests for actions_bootstrap.utils.prompts."""

from unittest.mock import patch

import click
import pytest

from actions_bootstrap.utils.prompts import ClickInputProvider, ScriptedInputProvider


class TestScriptedInputProvider:
    """Tests for the scripted provider used by tests and non-terminal callers."""

    def test_answers_in_order(self) -> None:
        prompter = ScriptedInputProvider([True, " https://github.com/acme/widgets ", "s3cr3t "])

        assert prompter.confirm("Configure?") is True
        assert prompter.prompt("URL") == "https://github.com/acme/widgets"
        assert prompter.prompt_secret("Value") == "s3cr3t "
        assert prompter.asked == ["Configure?", "URL", "Value"]
        assert prompter.remaining == 0

    def test_exhausted_behaves_like_interrupt(self) -> None:
        prompter = ScriptedInputProvider()

        with pytest.raises(click.Abort):
            prompter.confirm("Configure?")

    def test_wrong_answer_type(self) -> None:
        prompter = ScriptedInputProvider(["yes"])

        with pytest.raises(TypeError, match="not a bool"):
            prompter.confirm("Configure?")


class TestClickInputProvider:
    """Tests for the terminal provider."""

    @patch("actions_bootstrap.utils.prompts.click.confirm", return_value=False)
    def test_confirm_passes_default(self, mock_confirm) -> None:
        assert ClickInputProvider().confirm("Configure DEPLOY_HOST now?") is False
        mock_confirm.assert_called_once_with("Configure DEPLOY_HOST now?", default=False)

    @patch("actions_bootstrap.utils.prompts.click.prompt", return_value="value")
    def test_secret_prompt_hides_input(self, mock_prompt) -> None:
        ClickInputProvider().prompt_secret("Value for DEPLOY_HOST")

        assert mock_prompt.call_args.kwargs["hide_input"] is True
