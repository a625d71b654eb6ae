from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field

# service 별 응답 구조 정의


# 경로 찾기 응답
# from/to는 파이썬 예약어 => alias 사용
class RouteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(..., alias="from", description="출발역")
    destination: str = Field(..., alias="to", description="도착역")
    route: List[str] = Field(..., description="역 순서 (출발역, 도착역 포함)")
    numberOfStations: int = Field(..., description="이동 역 수")
    numberOfInterchanges: int = Field(..., description="환승 횟수 (0 또는 1)")
    changeAt: Optional[str] = Field(None, description="환승역 (환승이 없으면 null)")
    estimatedTimeMinutes: int = Field(..., description="예상 소요시간 (분)")
    estimatedPriceINR: int = Field(..., description="예상 요금 (INR)")


# 에러 응답
class ErrorResponse(BaseModel):
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")


class StationInfo(BaseModel):
    name: str = Field(..., description="역 이름")
    line: int = Field(..., description="기준 노선")
    interchange: bool = Field(..., description="환승역 여부")


# 전체 역 목록
class StationListResponse(BaseModel):
    count: int = Field(..., description="역 수")
    stations: List[StationInfo] = Field(default_factory=list)


# 역 검색 응답 (자동완성)
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[StationInfo] = Field(default_factory=list, description="역 정보 리스트")


# 역 검증 응답
class StationValidateResponse(BaseModel):
    valid: bool = Field(..., description="유효 여부")
    station_name: str = Field(..., description="역 이름")
    line: Optional[int] = Field(None, description="기준 노선")
    interchange: Optional[bool] = Field(None, description="환승역 여부")
    message: Optional[str] = Field(None, description="오류 메시지 (유효하지 않을 때)")


# 노선 목록
class LinesResponse(BaseModel):
    lines: Dict[int, List[str]] = Field(..., description="노선별 역 순서")
    total_lines: int = Field(..., description="노선 수")
