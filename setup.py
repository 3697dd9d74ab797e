"""setuptools setup for LifeRPG.

Install for development:
    pip install -e ".[test]"
    python -m liferpg status
"""

from setuptools import setup, find_packages

setup(
    name="LifeRPG",
    version="0.1.0",
    description="Gamified habit tracker: XP, levels, streaks, loot and achievements.",
    packages=find_packages(include=["liferpg", "liferpg.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["liferpg=liferpg.__main__:main"],
    },
)
