"""Setup script for the product-catalog-api package following Cosmic Python pattern."""

from setuptools import setup, find_namespace_packages

setup(
    name="product-catalog-api",
    version="1.0.0",
    description="Product catalog intake API with event-driven email notifications",
    author="Product Catalog Team",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["shared*", "product_intake*", "notifications*"]),
    py_modules=["config"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "pydantic",
        "redis",
        "minio",
        "requests",
        "email-validator",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "httpx",
            "fakeredis",
            "tenacity",
        ],
        "dev": [
            "black",
            "flake8",
            "mypy",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "product-notifier=notifications.entrypoints.redis_eventconsumer:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
    ],
)
