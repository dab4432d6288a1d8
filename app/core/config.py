"""
Configuration settings for the resume project parser service.

Values come from the environment (or a local .env file).
"""

from dotenv import load_dotenv
load_dotenv()          # must run before os.getenv(...)
import os

SERVICE_NAME = os.getenv("SERVICE_NAME", "resume-project-parser")
SERVICE_VERSION = os.getenv("SERVICE_VERSION", "0.1.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Upload size limit for POST /parse, in bytes
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
