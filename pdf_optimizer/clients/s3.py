"""Client wrapper for S3 operations."""

from pathlib import Path

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from ..config.app import AppConfig
from ..middleware.exceptions import S3DownloadError, S3UploadError
from ..middleware.logging import logger


class S3Client:
    """Client wrapper for S3 operations on the asset bucket."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize S3 client.

        Args:
            config: Application configuration
        """
        self.config = config
        credentials = config.aws_credentials
        if credentials:
            self.s3 = boto3.client(
                "s3",
                region_name=credentials.region,
                aws_access_key_id=credentials.access_key_id,
                aws_secret_access_key=credentials.secret_access_key,
            )
        else:
            self.s3 = boto3.client("s3")
        self.bucket = config.pdf_bucket_name

    def download_file(self, object_key: str, file_path: Path) -> None:
        """Stream an object from the bucket to a local file.

        Args:
            object_key: S3 object key
            file_path: Local file path to save the downloaded file

        Raises:
            S3DownloadError: If download fails
        """
        try:
            self.s3.download_file(self.bucket, object_key, str(file_path))
        except (ClientError, BotoCoreError) as e:
            raise S3DownloadError(
                f"Failed to download {object_key}",
                details={"bucket": self.bucket, "key": object_key, "e": str(e)},
            )
        logger.debug(
            "Downloaded S3 object",
            extra={"key": object_key, "file_path": str(file_path)},
        )

    def upload_file(self, object_key: str, file_path: Path) -> None:
        """Upload a local PDF file to the bucket.

        Args:
            object_key: S3 object key
            file_path: Local file to upload

        Raises:
            S3UploadError: If upload fails
        """
        try:
            self.s3.upload_file(
                str(file_path),
                self.bucket,
                object_key,
                ExtraArgs={"ContentType": "application/pdf"},
            )
        except (ClientError, BotoCoreError, S3UploadFailedError) as e:
            raise S3UploadError(
                f"Failed to upload {object_key}",
                details={"bucket": self.bucket, "key": object_key, "e": str(e)},
            )
        logger.debug(
            "Uploaded S3 object",
            extra={"key": object_key, "file_path": str(file_path)},
        )
