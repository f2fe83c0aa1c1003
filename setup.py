from setuptools import find_packages, setup

setup(
    name="gator",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    description="Command-line scaffold for a feed aggregator",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["gator=gator.cli.runner:main"]},
)
