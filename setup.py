"""
Setup file for Shopify Tag Checker.
Allows installation in development mode: pip install -e .
"""
from setuptools import setup, find_namespace_packages

setup(
    name="shopify-tag-checker",
    version="1.0.0",
    description="Weekly Shopify job reporting products that lack a required tag",
    packages=find_namespace_packages(include=["compliance*", "delivery*", "reporting*", "scanner*", "utils*"]),
    py_modules=["lambda_handler"],
    python_requires=">=3.9",
    install_requires=[
        "requests",
        "jinja2",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ],
    },
)
