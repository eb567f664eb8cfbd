from setuptools import setup, find_packages

setup(
    name="FloatBitScope",
    version="0.1.0",
    description="Decode and display the IEEE-754 bit fields of binary32/binary64 values",
    author="FloatBitScope Project",
    packages=find_packages(exclude=["tests", "tests.*"]),  # This will find 'float_bits'
    install_requires=[
        "torch>=2.0.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "floatbits=float_bits.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
