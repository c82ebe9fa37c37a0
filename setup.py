from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="countryemoji",
    version="0.1.0",
    author="",
    author_email="",
    description="Convert between country codes, country names and flag emoji",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'countryemoji.countries': ['data/*.yaml', 'data/*.parquet', 'data/build_countries.py'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "pandas>=1.3.0",
        "pyarrow>=10.0.0",
        "pyyaml>=5.4",
        "pycountry>=22.1.10",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
