from setuptools import setup, find_packages

setup(
    name="unixemu",
    version="0.1.0",
    description="A full-screen Unix-style terminal emulator shell",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "unixemu=unixemu.__main__:main",
        ],
    },
    python_requires=">=3.12",
)
