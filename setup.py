"""Package build script"""
import setuptools

with open("./VERSION", "r", encoding="utf-8") as f:
    __version__ = f.read().strip()

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="indiangrid",
    version=__version__,
    author="",
    author_email="",
    description="Conversion between geographic coordinates and the Indian Grid System.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('indiangrid*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"indiangrid": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20',
        'pydantic>=2,<3',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
