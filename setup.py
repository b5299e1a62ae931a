from setuptools import setup, find_packages

setup(
    name="exchange-bdd",
    version="0.1.0",
    description="Runner BDD e agregador de resultados para o cliente da API da exchange",
    author="Marcos Remar",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25.0",
        "python-dotenv>=1.0.0",
        "structlog>=23.0.0",
        "pytest>=7.0",
        "pytest-bdd>=6.0",
    ],
    extras_require={
        "test": [
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "exchange-bdd=exchange_bdd.cli:main",
        ],
    },
)
