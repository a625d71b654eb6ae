"""
Patna Metro 정적 노선 데이터

stations: 역 이름 -> 기준 노선, 환승역 여부
lines: 노선 번호 -> 운행 순서대로 정렬된 역 목록
interchanges: 환승역 -> 연결 노선 (선언 순서 = 환승 후보 탐색 순서)
"""

METRO_DATA = {
    "stations": {
        # 1호선
        "Danapur Cantonment": {"line": 1, "interchange": False},
        "Saguna More": {"line": 1, "interchange": False},
        "RPS More": {"line": 1, "interchange": False},
        "Patliputra": {"line": 1, "interchange": False},
        "Rukanpura": {"line": 1, "interchange": False},
        "Raja Bazar": {"line": 1, "interchange": False},
        "Patna Zoo": {"line": 1, "interchange": False},
        "Vikas Bhawan": {"line": 1, "interchange": False},
        "Vidyut Bhawan": {"line": 1, "interchange": False},
        "Patna Junction": {"line": 1, "interchange": True},
        "Mithapur": {"line": 1, "interchange": False},
        "Ramkrishna Nagar": {"line": 1, "interchange": False},
        "Jaganpur": {"line": 1, "interchange": False},
        "Khemni Chak": {"line": 1, "interchange": True},
        # 2호선 (Patna Junction, Khemni Chak은 1호선 소속 환승역)
        "New ISBT": {"line": 2, "interchange": False},
        "Zero Mile": {"line": 2, "interchange": False},
        "Bhoothnath": {"line": 2, "interchange": False},
        "Malahi Pakri": {"line": 2, "interchange": False},
        "Rajendra Nagar": {"line": 2, "interchange": False},
        "Moin Ul Haq Stadium": {"line": 2, "interchange": False},
        "Patna University": {"line": 2, "interchange": False},
        "PMCH": {"line": 2, "interchange": False},
        "Gandhi Maidan": {"line": 2, "interchange": False},
        "Akashvani": {"line": 2, "interchange": False},
    },
    "lines": {
        1: [
            "Danapur Cantonment",
            "Saguna More",
            "RPS More",
            "Patliputra",
            "Rukanpura",
            "Raja Bazar",
            "Patna Zoo",
            "Vikas Bhawan",
            "Vidyut Bhawan",
            "Patna Junction",
            "Mithapur",
            "Ramkrishna Nagar",
            "Jaganpur",
            "Khemni Chak",
        ],
        2: [
            "Patna Junction",
            "Akashvani",
            "Gandhi Maidan",
            "PMCH",
            "Patna University",
            "Moin Ul Haq Stadium",
            "Rajendra Nagar",
            "Malahi Pakri",
            "Khemni Chak",
            "Bhoothnath",
            "Zero Mile",
            "New ISBT",
        ],
    },
    "interchanges": {
        "Patna Junction": [1, 2],
        "Khemni Chak": [1, 2],
    },
}
