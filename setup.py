from setuptools import setup, find_packages

setup(
    name="bufswitch",
    version="0.1.0",
    description="Window-scoped buffer switching with recency ordering and live filtering",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bufswitch=bufswitch.main:main",
        ],
    },
)
