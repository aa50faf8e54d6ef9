from setuptools import setup

setup(
    name="weakmd",
    version="0.1.0",
    description="Converter from a small in-house markdown dialect to HTML.",
    license="MIT",
    packages=["weakmd"],
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions>=4.4",
    ],
    extras_require={
        "test": [
            "pytest",
            "sybil>=6",
        ],
    },
)
