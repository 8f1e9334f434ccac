"""
Unit tests for the exception hierarchy.
"""

from cloud_deployer.core.exceptions import (
    BuildError,
    ConfigurationError,
    DeploymentError,
    FetchError,
    PipelineCancelledError,
    ProviderError,
    UnboundVariableError,
    UnknownProviderError,
    UnsupportedLanguageError,
    UnsupportedProviderError,
    error_kind,
)


class TestErrorKinds:

    def test_configuration_errors_share_a_base(self):
        for error in (
            UnknownProviderError("x", []),
            UnsupportedProviderError("x", []),
            UnboundVariableError("x"),
            UnsupportedLanguageError("x", []),
        ):
            assert isinstance(error, ConfigurationError)
            assert isinstance(error, DeploymentError)

    def test_kinds_match_reported_names(self):
        assert error_kind(UnknownProviderError("x", [])) == "UnknownProvider"
        assert error_kind(UnsupportedProviderError("x", [])) == "UnsupportedProvider"
        assert error_kind(UnboundVariableError("x")) == "UnboundVariable"
        assert error_kind(UnsupportedLanguageError("x", [])) == "UnsupportedLanguage"
        assert error_kind(FetchError("x")) == "FetchError"
        assert error_kind(BuildError("x")) == "BuildError"
        assert error_kind(ProviderError("x")) == "ProviderError"
        assert error_kind(PipelineCancelledError()) == "Cancelled"

    def test_foreign_exception_kind_is_class_name(self):
        assert error_kind(KeyError("x")) == "KeyError"


class TestErrorMessages:

    def test_tags_added_after_construction_appear_in_message(self):
        error = ProviderError("rollout failed")
        error.provider = "gcp"
        error.stage = "Deploy"

        assert str(error) == "rollout failed [provider=gcp, stage=Deploy]"

    def test_collaborator_detail_is_passed_through(self):
        original = OSError("disk full")
        error = BuildError("mvn exited with 1", original_error=original)

        assert error.detail == "mvn exited with 1"
        assert error.original_error is original

    def test_configuration_error_mentions_file(self):
        error = ConfigurationError("Missing required field 'label'", config_file="config.json")

        assert "(file: config.json)" in str(error)
