"""
パスタリー（Passtally）ルールエンジンのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="passtally",
    version="1.0.0",
    description="パスタリー - 6x6盤面のタイル配置ボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["passtally", "passtally.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.11.10",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
