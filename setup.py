import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="elmpipe",
    version="0.1.0",
    description="A scikit-learn-compatible Extreme Learning Machine binary classifier",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    keywords='Extreme Learning Machine, ELM, scikit-learn',
    install_requires=[
        'scikit-learn>=1.0',
        'numpy>=1.18.1',
        'scipy>=1.4.0',
        'joblib>=0.13.2',
        'pandas>=1.0.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
)
