from setuptools import find_packages, setup

setup(
    name="clparser",
    version="0.1.0",
    description="Declarative command line parsing with option rules.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["clparser", "clparser.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "pydantic>=2",
        "pyyaml",
        "toml",
        "python-dateutil",
        "prompt_toolkit",
        "python-json-logger>=3",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["clparser=clparser.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
