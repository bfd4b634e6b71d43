"""
changelog-update

git 태그 이력을 기반으로 AI가 생성한 버전별 항목을 CHANGELOG.md에 병합하는 도구
"""

__version__ = "0.1.0"
