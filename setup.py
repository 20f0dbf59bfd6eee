"""Setup file for Hogar package."""
from setuptools import setup, find_packages

setup(
    name="hogar",
    version="0.1.0",
    description="Household savings tracker and shared grocery list",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "sqlalchemy>=2.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "streamlit>=1.37",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
        ],
    },
    python_requires=">=3.11",
)
