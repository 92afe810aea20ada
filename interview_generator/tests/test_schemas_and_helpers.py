"""
Tests for schemas, prompt building, cover picking, settings and log masking.
"""

import logging

import pytest
from pydantic import ValidationError

from interview_generator.core.config import Settings
from interview_generator.core.firebase import build_service_account
from interview_generator.core.logger import SecretMaskingFilter, mask_secrets
from interview_generator.core.prompts import generate_interview_questions_prompt
from interview_generator.schemas.interview import (
    GenerateInterviewRequest,
    InterviewRecord,
    normalize_techstack,
)
from interview_generator.services.interview import INTERVIEW_COVERS, get_random_interview_cover


# ==================== Schemas ==================== #

class TestTechstack:

    def test_comma_string_is_split(self):
        assert normalize_techstack("Go,Rust") == ["Go", "Rust"]

    def test_string_elements_are_trimmed(self):
        assert normalize_techstack(" React , Next.js ,TypeScript") == ["React", "Next.js", "TypeScript"]

    def test_list_is_trimmed_element_wise(self):
        assert normalize_techstack([" Go", "Rust "]) == ["Go", "Rust"]

    def test_list_elements_are_stringified(self):
        assert normalize_techstack(["Python", 3]) == ["Python", "3"]

    @pytest.mark.parametrize("value", [None, 42, {"a": 1}])
    def test_other_values_become_empty(self, value):
        assert normalize_techstack(value) == []


class TestRequestModel:

    def test_all_fields_optional(self):
        payload = GenerateInterviewRequest.model_validate({})

        assert payload.role is None
        assert payload.userid is None

    def test_unknown_fields_are_ignored(self):
        payload = GenerateInterviewRequest.model_validate({"role": "QA", "extra": True})

        assert payload.role == "QA"
        assert not hasattr(payload, "extra")


class TestInterviewRecord:

    def test_document_uses_camel_case_keys(self):
        record = InterviewRecord(questions=["Q"], user_id="u", cover_image="/covers/x.png")

        document = record.to_document()

        assert set(document) == {
            "role", "type", "level", "techstack", "questions",
            "userId", "finalized", "coverImage", "createdAt",
        }
        assert document["finalized"] is True
        assert document["createdAt"].endswith("Z")

    def test_questions_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            InterviewRecord(questions=[], cover_image="/covers/x.png")


# ==================== Prompt ==================== #

class TestPrompt:

    def test_values_are_interpolated(self):
        prompt = generate_interview_questions_prompt("Data Engineer", "Junior", ["Python", "SQL"], "behavioural", 5)

        assert "The job role is Data Engineer." in prompt
        assert "The tech stack used in the job is: Python, SQL." in prompt
        assert "should lean towards: behavioural." in prompt
        assert "The amount of questions required is: 5." in prompt
        assert prompt.endswith('["Question 1", "Question 2", "Question 3"]')

    def test_voice_assistant_constraint(self):
        prompt = generate_interview_questions_prompt(None, None, None, None, None)

        assert 'do not use "/" or "*"' in prompt
        assert "The job role is ." in prompt


# ==================== Covers ==================== #

def test_random_cover_comes_from_pool():
    for _ in range(20):
        cover = get_random_interview_cover()
        assert cover.startswith("/covers/")
        assert cover[len("/covers"):] in INTERVIEW_COVERS


# ==================== Settings ==================== #

class TestSettings:

    def test_private_key_newlines_are_normalized(self):
        config = Settings(FIREBASE_PRIVATE_KEY="-----BEGIN-----\\nabc\\n-----END-----")

        assert config.FIREBASE_PRIVATE_KEY == "-----BEGIN-----\nabc\n-----END-----"

    def test_settings_are_immutable(self):
        config = Settings()

        with pytest.raises(ValidationError):
            config.VAPI_SECRET = "changed"

    def test_google_key_alias(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "alias-key")

        assert Settings().GEMINI_API_KEY == "alias-key"

    def test_firebase_configured(self):
        assert not Settings(FIREBASE_PROJECT_ID="", FIREBASE_CLIENT_EMAIL="", FIREBASE_PRIVATE_KEY="").firebase_configured
        assert Settings(
            FIREBASE_PROJECT_ID="p", FIREBASE_CLIENT_EMAIL="e@p.iam", FIREBASE_PRIVATE_KEY="k"
        ).firebase_configured

    def test_service_account_shape(self):
        config = Settings(FIREBASE_PROJECT_ID="p", FIREBASE_CLIENT_EMAIL="e@p.iam", FIREBASE_PRIVATE_KEY="k")

        account = build_service_account(config)

        assert account["type"] == "service_account"
        assert account["project_id"] == "p"
        assert account["client_email"] == "e@p.iam"
        assert account["private_key"] == "k"


# ==================== Logging ==================== #

class TestSecretMasking:

    def test_bearer_token_is_masked(self):
        masked = mask_secrets("Authorization header: Bearer eyJhbGciOiJSUzI1NiIsImtpZCI6")

        assert "eyJhbGci" not in masked
        assert "***MASKED***" in masked

    def test_api_key_is_masked(self):
        assert "AIzaSy" not in mask_secrets("api_key=AIzaSyA1234567890abcdefghij")

    def test_filter_masks_record_args(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "token %s", ("Bearer abcdefghijklmnopqrstuvwxyz",), None)

        SecretMaskingFilter().filter(record)

        assert "abcdefghijklmnopqrstuvwxyz" not in record.getMessage()
