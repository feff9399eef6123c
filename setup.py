from setuptools import setup, find_packages

setup(
    name="json_to_ddl",
    version="0.1.0",
    description="Infer normalized SQL tables from JSON and generate SQLite, MySQL and Postgres scripts",
    author="bokuwagiga",
    url="https://github.com/bokuwagiga/json_to_sql",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "json-to-ddl=JsonToDDL.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
)
