from setuptools import find_packages, setup

setup(
    name="argstomp",
    version="0.1.0",
    description="Bind command-line tokens to typed destination slots from a declarative option table.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="The argstomp Authors",
    packages=find_packages(include=["argstomp", "argstomp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "python-json-logger>=3.1",
        "PyYAML>=6.0",
        "rich>=13.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "argstomp=argstomp.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
