"""Packaging for LegendTimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle (optional):
    pip install py2app
    python setup.py py2app
"""

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "LegendTimer",
        "CFBundleDisplayName": "LegendTimer",
        "CFBundleIdentifier": "com.legendtimer.app",
        "CFBundleVersion": "1.0.0",
        "CFBundleShortVersionString": "1.0.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="LegendTimer",
    version="1.0.0",
    packages=find_packages(include=["legendtimer", "legendtimer.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.5",
        "numpy>=1.24",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": ["legendtimer = legendtimer.__main__:main"],
    },
)
