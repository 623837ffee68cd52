from setuptools import setup
from logz import __version__

setup(
    name="logz",
    long_description="logz is a process-wide leveled logger with separate stdout and output thresholds.",
    version=__version__,
    packages=[
        "logz",
    ],
    include_package_data=True,
    install_requires=[
        "click>=8.0.3,<9.0.0",
        "pyyaml>=6.0.0,<7.0.0",
    ],
    extras_require={
        "tests": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points="""
        [console_scripts]
        logz=logz.cli:cli
    """,
)
