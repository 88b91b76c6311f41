"""이 파일은 .py 빌드 플러그인 실행기 패키지 초기화 모듈입니다."""

__version__ = "0.1.0"
