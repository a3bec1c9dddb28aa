from setuptools import setup, find_packages

setup(
    name="checkers-rules",
    version="1.0.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "checkers=checkers.__main__:main",
        ],
    },
    author="Checkers Engine Team",
    description="Rules engine for 8x8 checkers: move, capture and promotion legality",
)
