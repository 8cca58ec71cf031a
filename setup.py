# setup.py
from setuptools import setup, find_packages

setup(
    name="domain_crawler",
    version="0.1.0",
    description="Asynchronous single-domain web crawler",
    packages=find_packages(include=["domain_crawler", "domain_crawler.*"]),
    package_data={"domain_crawler": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "domain-crawler=domain_crawler.cli:main",
        ],
    },
    python_requires=">=3.11",
)
