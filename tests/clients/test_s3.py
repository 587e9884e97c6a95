"""Unit tests for the S3 client."""

import base64
import json
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from botocore.exceptions import ClientError

from pdf_optimizer.clients.s3 import S3Client
from pdf_optimizer.config.app import AppConfig, AWSCredentials
from pdf_optimizer.middleware.exceptions import S3DownloadError, S3UploadError


def client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "operation")


class TestS3Client(unittest.TestCase):
    """Test cases for the S3 client."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_config = MagicMock(spec=AppConfig)
        self.mock_config.pdf_bucket_name = "asset-bucket"
        self.mock_config.aws_credentials = None

        self.boto_patch = patch("pdf_optimizer.clients.s3.boto3.client")
        self.mock_boto_client = self.boto_patch.start()
        self.mock_s3 = MagicMock()
        self.mock_boto_client.return_value = self.mock_s3

        self.client = S3Client(self.mock_config)

    def tearDown(self):
        """Tear down test fixtures."""
        self.boto_patch.stop()

    def test_default_credentials(self):
        self.mock_boto_client.assert_called_once_with("s3")

    def test_explicit_credentials(self):
        """Decoded AWS_CONFIG credentials are passed to boto3."""
        # Arrange
        encoded = base64.b64encode(
            json.dumps(
                {"aws": {"region": "ap-south-1", "accessKeyId": "AK", "secretAccessKey": "SK"}}
            ).encode("utf-8")
        ).decode("ascii")
        self.mock_config.aws_credentials = AWSCredentials.from_base64(encoded)
        self.mock_boto_client.reset_mock()

        # Act
        S3Client(self.mock_config)

        # Assert
        self.mock_boto_client.assert_called_once_with(
            "s3",
            region_name="ap-south-1",
            aws_access_key_id="AK",
            aws_secret_access_key="SK",
        )

    def test_download_file(self):
        self.client.download_file("lessons/a.pdf", Path("/tmp/a.pdf"))

        self.mock_s3.download_file.assert_called_once_with(
            "asset-bucket", "lessons/a.pdf", "/tmp/a.pdf"
        )

    def test_download_file_error(self):
        self.mock_s3.download_file.side_effect = client_error("404")

        with self.assertRaises(S3DownloadError) as ctx:
            self.client.download_file("lessons/a.pdf", Path("/tmp/a.pdf"))

        self.assertEqual("lessons/a.pdf", ctx.exception.details["key"])

    def test_upload_file(self):
        """Uploads go to the same bucket as the originals."""
        self.client.upload_file("lessons/a_compressed_optimized.pdf", Path("/tmp/b.pdf"))

        self.mock_s3.upload_file.assert_called_once_with(
            "/tmp/b.pdf",
            "asset-bucket",
            "lessons/a_compressed_optimized.pdf",
            ExtraArgs={"ContentType": "application/pdf"},
        )

    def test_upload_file_error(self):
        self.mock_s3.upload_file.side_effect = client_error("AccessDenied")

        with self.assertRaises(S3UploadError):
            self.client.upload_file("k.pdf", Path("/tmp/b.pdf"))
