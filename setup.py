import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='dosatag',
    version='0.1.0',
    description="Schema metadata from record type and field tags",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires = [
        'textX          >= 3.0.0,  < 5.0.0',
    ],
    extras_require = {
        'test': [
            'pytest     >= 7.0.0',
        ],
    }

)
