import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    OTP_DURATION_SECONDS = int(data.get("OTP_DURATION_SECONDS", 60))
    OTP_TICK_INTERVAL_SECONDS = float(data.get("OTP_TICK_INTERVAL_SECONDS", 1.0))
    OTP_MIN_LENGTH = int(data.get("OTP_MIN_LENGTH", 6))
    NOTIFY_DURATION_MS = int(data.get("NOTIFY_DURATION_MS", 3000))
    RECOVERY_API_BASE_URL = data.get("RECOVERY_API_BASE_URL", "http://localhost:8080/api/v1/auth")
    RECOVERY_API_TIMEOUT = float(data.get("RECOVERY_API_TIMEOUT", 10.0))
    SEND_OTP_PATH = data.get("SEND_OTP_PATH", "/forgot-password/send-otp")
    VERIFY_OTP_PATH = data.get("VERIFY_OTP_PATH", "/forgot-password/verify-otp")
    RESET_PASSWORD_PATH = data.get("RESET_PASSWORD_PATH", "/forgot-password/reset-password")
