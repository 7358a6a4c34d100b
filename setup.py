
from setuptools import setup, find_packages
setup(
    name="pwned_store",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "zstandard"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["pwned-store = pwned_store.cli:main"]},
    python_requires=">=3.10",
)
