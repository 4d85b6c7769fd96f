import setuptools

setuptools.setup(
    name="serialrw",
    version="1.0.0",
    description=(
        "Sequential binary reader and writer with base-128 variable-length integers"
    ),
    license="MIT",
    package_dir={"": "src"},
    packages=["serialrw"],
    package_data={"serialrw": ["py.typed"]},
    python_requires=">=3.10",
    extras_require={
        "dev": [
            "hypothesis>=6.0",
            "pytest>=7.0",
        ],
    },
)
