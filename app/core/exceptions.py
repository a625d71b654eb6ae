# custom exception 정의 및 관리
# status_code => API 계층에서 HTTP 응답으로 변환할 때 사용


class MetroException(Exception):  # 예외 구조 정의
    status_code: int = 500

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# 서버 시작 시점의 노선 데이터 오류 => 복구 불가, 서버 시작 중단
class ConfigurationError(MetroException):
    def __init__(self, message: str = "노선 데이터 구성이 올바르지 않습니다"):
        super().__init__(message, code="NETWORK_CONFIG_ERROR")


class InvalidStationException(MetroException):
    status_code = 404

    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


# 두 역 모두 유효하지만 환승 1회 이내로 연결되지 않음
class RouteNotFoundException(MetroException):
    status_code = 404

    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")


class MissingParameterException(MetroException):
    status_code = 400

    def __init__(self, message: str = 'Please provide "from" and "to" station names.'):
        super().__init__(message, code="MISSING_PARAMETER")
