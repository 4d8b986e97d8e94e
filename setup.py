
from setuptools import setup, find_packages

setup(
    name="resultfold",
    version="0.1.0",
    description="Fail-fast and bisecting folds over lists of fallible outcomes",
    long_description="Collapse a batch of Ok/Err outcomes into all values or the first failure, or partition them into successes and failures",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
    'click>=8.1',
    'pandas>=2.0.3',
    'PyYAML>=6.0',
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "resultfold=resultfold.cli.main:cli",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    )
