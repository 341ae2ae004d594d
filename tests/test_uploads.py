"""Upload parameter signing."""

import pytest
from cloudinary.utils import api_sign_request

from storefront.core.config import CloudinarySettings
from storefront.modules.uploads import UploadSigner, UploadSigningError

SECRET = "test-secret"
TIMESTAMP = 1_700_000_000


@pytest.fixture
def signer():
    return UploadSigner(
        CloudinarySettings(cloud_name="demo", api_key="123456789", api_secret=SECRET),
        clock=lambda: TIMESTAMP + 0.75,
    )


class TestUploadSigner:
    def test_same_inputs_same_signature(self, signer):
        first = signer.sign_upload(folder="Radha/Krishna", public_id="flute")
        second = signer.sign_upload(folder="Radha/Krishna", public_id="flute")

        assert first.signature == second.signature
        assert first.timestamp == TIMESTAMP

    def test_every_signed_parameter_changes_signature(self, signer):
        base = signer.sign_upload(folder="Radha", public_id="a", context="price=1", type="upload").signature

        assert signer.sign_upload(folder="Other", public_id="a", context="price=1").signature != base
        assert signer.sign_upload(folder="Radha", public_id="b", context="price=1").signature != base
        assert signer.sign_upload(folder="Radha", public_id="a", context="price=2").signature != base
        assert signer.sign_upload(folder="Radha", public_id="a", context="price=1", type="private").signature != base
        assert signer.sign_upload(folder="Radha", public_id="a", context="price=1", timestamp=TIMESTAMP + 1).signature != base

    def test_signature_matches_sdk_over_expected_params(self, signer):
        signed = signer.sign_upload(folder="Radha", context="price%3D10%7Cdescription%3DBamboo%20flute")

        expected = api_sign_request(
            {
                "timestamp": TIMESTAMP,
                "type": "upload",
                "folder": "Radha",
                "context": "price=10|description=Bamboo flute",
            },
            SECRET,
        )
        assert signed.signature == expected

    def test_optional_params_are_left_out(self, signer):
        params = signer.build_params(timestamp=TIMESTAMP)

        assert params == {"timestamp": TIMESTAMP, "type": "upload"}

    def test_response_carries_public_identifiers_only(self, signer):
        signed = signer.sign_upload()

        assert signed.api_key == "123456789"
        assert signed.cloud_name == "demo"
        assert SECRET not in (signed.signature, signed.api_key, signed.cloud_name)

    def test_secret_changes_signature(self, signer):
        other = UploadSigner(CloudinarySettings(api_secret="another-secret"), clock=lambda: TIMESTAMP)

        assert other.sign_upload(folder="Radha").signature != signer.sign_upload(folder="Radha").signature

    def test_missing_secret(self):
        with pytest.raises(UploadSigningError):
            UploadSigner(CloudinarySettings()).sign_upload(folder="Radha")
