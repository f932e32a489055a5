"""
Unit tests for environment-backed settings.

Environment is set with monkeypatch; .env files are ignored.
"""

from s3_upload.config.settings import Settings, get_settings


def load() -> Settings:
    return Settings(_env_file=None)


class TestSettingsFromEnvironment:
    """How S3_UPLOAD_* variables map onto fields."""

    def test_defaults_are_empty(self):
        """With nothing set, there is no bucket, region or URL."""
        settings = load()

        assert settings.bucket is None
        assert settings.region is None
        assert settings.url is None
        assert settings.keep_original_url is False
        assert settings.keep_original_filename is False
        assert not settings.has_credentials

    def test_reads_prefixed_variables(self, monkeypatch):
        """Bucket, region and URL come from S3_UPLOAD_*."""
        monkeypatch.setenv("S3_UPLOAD_BUCKET", "bkt")
        monkeypatch.setenv("S3_UPLOAD_REGION", "eu-west-1")
        monkeypatch.setenv("S3_UPLOAD_URL", "cdn.example.com")

        settings = load()

        assert settings.bucket == "bkt"
        assert settings.region == "eu-west-1"
        assert settings.url == "cdn.example.com"

    def test_empty_variable_counts_as_unset(self, monkeypatch):
        """An exported but empty variable should not become an empty bucket."""
        monkeypatch.setenv("S3_UPLOAD_BUCKET", "")

        assert load().bucket is None


class TestFlagParsing:
    """Flags are only enabled by the literal string 'true'."""

    def test_literal_true_enables_flag(self, monkeypatch):
        """The exact string 'true' switches both flags on."""
        monkeypatch.setenv("S3_UPLOAD_KEEP_ORIGINAL_URL", "true")
        monkeypatch.setenv("S3_UPLOAD_KEEP_ORIGINAL_FILENAME", "true")

        settings = load()

        assert settings.keep_original_url is True
        assert settings.keep_original_filename is True

    def test_other_truthy_strings_do_not(self, monkeypatch):
        """'1', 'yes' and 'True' are not 'true'."""
        for value in ["1", "yes", "True", "on"]:
            monkeypatch.setenv("S3_UPLOAD_KEEP_ORIGINAL_URL", value)
            assert load().keep_original_url is False

    def test_explicit_bool_is_kept(self):
        """Constructing settings in code still accepts real booleans."""
        settings = Settings(_env_file=None, keep_original_filename=True)

        assert settings.keep_original_filename is True


class TestCredentialVariables:
    """Access keys prefer S3_UPLOAD_* and fall back to AWS_*."""

    def test_prefixed_keys_win(self, monkeypatch):
        """S3_UPLOAD_* keys are preferred over AWS_* ones."""
        monkeypatch.setenv("S3_UPLOAD_ACCESS_KEY_ID", "upload-id")
        monkeypatch.setenv("S3_UPLOAD_SECRET_ACCESS_KEY", "upload-secret")
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "aws-id")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "aws-secret")

        settings = load()

        assert settings.access_key_id == "upload-id"
        assert settings.secret_access_key == "upload-secret"

    def test_falls_back_to_generic_aws_keys(self, monkeypatch):
        """With no S3_UPLOAD_* keys the AWS_* pair is used."""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "aws-id")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "aws-secret")

        settings = load()

        assert settings.access_key_id == "aws-id"
        assert settings.secret_access_key == "aws-secret"
        assert settings.has_credentials

    def test_half_a_pair_is_not_credentials(self, monkeypatch):
        """An id without a secret is not a usable pair."""
        monkeypatch.setenv("S3_UPLOAD_ACCESS_KEY_ID", "upload-id")

        assert not load().has_credentials

    def test_empty_prefixed_keys_fall_back_to_aws_keys(self, monkeypatch):
        """Exported but empty S3_UPLOAD_* keys still fall back to AWS_*."""
        monkeypatch.setenv("S3_UPLOAD_ACCESS_KEY_ID", "")
        monkeypatch.setenv("S3_UPLOAD_SECRET_ACCESS_KEY", "")
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "aws-id")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "aws-secret")

        settings = load()

        assert settings.access_key_id == "aws-id"
        assert settings.secret_access_key == "aws-secret"
        assert settings.has_credentials

    def test_fields_can_be_set_by_name(self):
        """Tests and callers can build settings without the env aliases."""
        settings = Settings(_env_file=None, access_key_id="id", secret_access_key="secret")

        assert settings.has_credentials


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_is_cached(self):
        """Settings are read once per process."""
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        """Clearing the cache picks up environment changes."""
        first = get_settings()
        monkeypatch.setenv("S3_UPLOAD_REGION", "ap-south-1")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().region == "ap-south-1"
