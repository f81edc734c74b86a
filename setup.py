from setuptools import setup, find_packages

setup(
    name="pwstrength",
    version="1.0.0",
    description="Deterministic password strength scoring with labeled bands",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "jsonschema>=4.20.0",
        "click>=8.1.7",
        "tqdm>=4.66.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pwstrength=pwstrength.cli:main",
        ],
    },
    python_requires=">=3.8",
)
