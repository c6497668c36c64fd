from setuptools import setup, find_packages

setup(
    name="siphashcd",
    version="0.1.0",
    description="Pure-Python SipHash-c-d keyed hashing with 64-bit and 128-bit outputs, a hashlib-style streaming API, and uint64 column hashing for pandas, pyarrow and polars.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
