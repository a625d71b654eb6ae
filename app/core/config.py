import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Patna Metro Route API"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 3000))

    # 노선 데이터 JSON 파일 경로
    # 지정하지 않으면 app/db/metro_data.py의 내장 데이터 사용
    NETWORK_DATA_FILE: Optional[str] = os.getenv("NETWORK_DATA_FILE") or None

    # 요금/소요시간 추정 상수
    TIME_PER_STATION_MINS: int = int(
        os.getenv("TIME_PER_STATION_MINS", 2)
    )  # 정차 시간 포함 역당 소요시간
    INTERCHANGE_TIME_MINS: int = int(os.getenv("INTERCHANGE_TIME_MINS", 5))
    COST_PER_STATION_INR: int = int(os.getenv("COST_PER_STATION_INR", 5))
    AVERAGE_SPEED_KMPH: int = int(os.getenv("AVERAGE_SPEED_KMPH", 34))  # 안내용

    # 성능 모니터링
    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: float = float(
        os.getenv("SLOW_REQUEST_THRESHOLD_MS", 500)
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")

    @property
    def FARE_CONFIG(self) -> dict:
        return {
            "time_per_station_mins": self.TIME_PER_STATION_MINS,
            "interchange_time_mins": self.INTERCHANGE_TIME_MINS,
            "cost_per_station_inr": self.COST_PER_STATION_INR,
            "average_speed_kmph": self.AVERAGE_SPEED_KMPH,
        }


settings = Settings()  # 모듈화
