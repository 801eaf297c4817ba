from setuptools import setup, find_packages

setup(
    name="welcome-i18n",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"welcome": ["templates/*.html", "templates/error/*.html", "static/*"]},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn[standard]",
        "gunicorn",
        "jinja2>=3.1",
        "python-multipart",
        "pydantic>=2.0.0",
        "slowapi",
        "prometheus-client",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
