import base64
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = Logger()

TRUE_VALUES = ("true", "1", "yes", "on")


class AWSCredentials(BaseModel):
    """Explicit AWS credentials decoded from the AWS_CONFIG variable."""

    region: str = Field(description="AWS region of the asset bucket")
    access_key_id: str = Field(description="AWS access key id")
    secret_access_key: str = Field(description="AWS secret access key")

    @classmethod
    def from_base64(cls, encoded: str) -> "AWSCredentials":
        """Decode a base64 JSON document of the form {"aws": {...}}.

        Raises:
            ValueError: If the value is not valid base64 JSON or misses keys
        """
        try:
            payload: Dict[str, Any] = json.loads(
                base64.b64decode(encoded).decode("utf-8")
            )
            aws = payload["aws"]
            return cls(
                region=aws["region"],
                access_key_id=aws["accessKeyId"],
                secret_access_key=aws["secretAccessKey"],
            )
        except (KeyError, TypeError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid AWS_CONFIG value: {e}") from e


class AppConfig(BaseModel):
    """Application configuration."""

    app_env: str = Field(description="Application environment (local, dev or prod)")
    mongo_url: str = Field(description="MongoDB server URL without database name")
    lesson_plan_db_name: str = Field(default="lessonplan-db")
    asset_db_name: str = Field(default="assets-db")
    lesson_plan_collection: str = Field(default="lessonPlans")
    asset_collection: str = Field(default="assets")
    pdf_bucket_name: str = Field(description="Name of the S3 bucket holding assets")
    aws_credentials: Optional[AWSCredentials] = Field(
        default=None,
        description="Explicit credentials; the default boto3 chain is used if unset",
    )
    page_size: int = Field(default=25, gt=0, description="Records per page")
    reference_key: str = Field(default="assetId")
    reference_max_depth: int = Field(default=100, gt=0)
    exports_dir: Path = Field(default=Path("exports"))
    temp_dir: Path = Field(default=Path("temp"))
    ghostscript_bin: str = Field(default="gs")
    image_resolution: int = Field(default=150, gt=0)
    compress_timeout_seconds: int = Field(default=600, gt=0)
    reprocess_optimized: bool = Field(
        default=False,
        description="Process assets that already carry a compressed rendition",
    )
    verify_page_count: bool = Field(default=True)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' modes, it reads directly from environment variables.

        Raises:
            ValueError: If the environment is unknown or a variable is invalid
            KeyError: If a required variable is missing
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        aws_config = os.getenv("AWS_CONFIG")

        return cls(
            app_env=app_env,
            mongo_url=os.environ["MONGO_URL"],
            lesson_plan_db_name=os.getenv("LESSONPLAN_DB_NAME", "lessonplan-db"),
            asset_db_name=os.getenv("ASSET_DB_NAME", "assets-db"),
            lesson_plan_collection=os.getenv("LESSONPLAN_COLLECTION", "lessonPlans"),
            asset_collection=os.getenv("ASSET_COLLECTION", "assets"),
            pdf_bucket_name=os.environ["PDF_BUCKET_NAME"],
            aws_credentials=AWSCredentials.from_base64(aws_config)
            if aws_config
            else None,
            page_size=int(os.getenv("PAGE_SIZE", "25")),
            reference_key=os.getenv("REFERENCE_KEY", "assetId"),
            reference_max_depth=int(os.getenv("REFERENCE_MAX_DEPTH", "100")),
            exports_dir=Path(os.getenv("EXPORTS_DIR", "exports")),
            temp_dir=Path(os.getenv("TEMP_DIR", "temp")),
            ghostscript_bin=os.getenv("GHOSTSCRIPT_BIN", "gs"),
            image_resolution=int(os.getenv("IMAGE_RESOLUTION", "150")),
            compress_timeout_seconds=int(os.getenv("COMPRESS_TIMEOUT_SECONDS", "600")),
            reprocess_optimized=os.getenv("REPROCESS_OPTIMIZED", "false").lower()
            in TRUE_VALUES,
            verify_page_count=os.getenv("VERIFY_PAGE_COUNT", "true").lower()
            in TRUE_VALUES,
        )
