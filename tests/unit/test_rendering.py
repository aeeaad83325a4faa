"""
Tests for Contact Email Rendering.
"""

from dataclasses import replace

import pytest

from frighet.services.rendering import Submission, render_submission_email


@pytest.fixture
def submission() -> Submission:
    return Submission(
        name="Ana Popescu",
        email="ana@example.com",
        product_type="Prepared Meals",
        weight="5",
        message="Ready meals for hiking.\nAbout 20 portions.",
        estimated_price=195.0,
        estimated_time=11.28,
    )


class TestRenderSubmissionEmail:
    """Tests for render_submission_email."""

    def test_subject_contains_name(self, submission):
        rendered = render_submission_email(submission)

        assert rendered.subject == "Freeze-Drying Request - Ana Popescu"

    def test_text_body_contains_all_fields(self, submission):
        text = render_submission_email(submission).text_body

        assert "Name: Ana Popescu" in text
        assert "Email: ana@example.com" in text
        assert "Product type: Prepared Meals" in text
        assert "Estimated weight: 5 kg" in text
        assert "195.00 RON" in text
        assert "11 hours" in text
        assert "Ready meals for hiking.\nAbout 20 portions." in text

    def test_html_body_contains_all_fields(self, submission):
        html = render_submission_email(submission).html_body

        assert "Ana Popescu" in html
        assert "ana@example.com" in html
        assert "Prepared Meals" in html
        assert "5 kg" in html
        assert "195.00 RON" in html
        assert "11 hours" in html

    def test_html_body_converts_newlines(self, submission):
        html = render_submission_email(submission).html_body

        assert "Ready meals for hiking.<br>About 20 portions." in html

    def test_missing_estimates_render_placeholder(self, submission):
        rendered = render_submission_email(
            Submission(
                name=submission.name,
                email=submission.email,
                product_type=submission.product_type,
                weight=submission.weight,
            )
        )

        assert "Preliminary price estimate: N/A" in rendered.text_body
        assert "Preliminary time estimate: N/A" in rendered.text_body
        assert "<strong>Preliminary price estimate:</strong> N/A" in rendered.html_body

    def test_missing_message_renders_placeholder(self, submission):
        rendered = render_submission_email(
            Submission(
                name=submission.name,
                email=submission.email,
                product_type=submission.product_type,
                weight=submission.weight,
                message="",
            )
        )

        assert "No message." in rendered.text_body
        assert "No message." in rendered.html_body

    def test_html_escapes_user_input(self, submission):
        rendered = render_submission_email(
            Submission(
                name="<script>alert(1)</script>",
                email=submission.email,
                product_type="Other",
                weight="1",
                message="a < b & c",
            )
        )

        assert "<script>" not in rendered.html_body
        assert "&lt;script&gt;" in rendered.html_body
        assert "a &lt; b &amp; c" in rendered.html_body
        assert "<script>alert(1)</script>" in rendered.text_body

    def test_newline_only_message_keeps_line_break(self, submission):
        rendered = render_submission_email(replace(submission, message="\n"))

        assert "<p><br></p>" in rendered.html_body
        assert "No message." not in rendered.html_body

    def test_trailing_newline_is_kept(self, submission):
        rendered = render_submission_email(replace(submission, message="Thanks\n"))

        assert "<p>Thanks<br></p>" in rendered.html_body
