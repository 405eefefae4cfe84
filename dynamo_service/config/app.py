import os
from pathlib import Path
from typing import Optional, Union

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = Logger()


class AppConfig(BaseModel):
    """Connection settings for the DynamoDB service resource."""

    aws_region: Optional[str] = Field(
        default=None, description="AWS region of the DynamoDB tables"
    )
    dynamodb_endpoint_url: Optional[str] = Field(
        default=None,
        description="Override of the DynamoDB endpoint, e.g. for DynamoDB Local",
    )

    @classmethod
    def from_env(cls, dotenv_path: Union[str, Path] = ".env") -> "AppConfig":
        """Load settings from AWS_REGION and DYNAMODB_ENDPOINT_URL.

        Values from a .env file fill in variables not already set in the
        process environment. Empty values are treated as unset.
        """
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})

        return cls(
            aws_region=os.getenv("AWS_REGION") or None,
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
        )
