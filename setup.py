from setuptools import setup, find_packages

setup(
    name="storeconf",
    version="1.0.0",
    description="Typed, validated cache and object store configuration",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "redis>=5.0.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.7.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "storeconf-check=storeconf.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
