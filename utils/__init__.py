"""utils: 유틸리티 모듈을 모아놓은 패키지.

Modules:
    exceptions: 비즈니스 계층 예외
"""
