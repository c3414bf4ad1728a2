from setuptools import find_packages, setup

setup(
    name="speech-builder",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0",
        "python-dotenv",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    description="Chainable SSML builder for Alexa speech responses",
)
