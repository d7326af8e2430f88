import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("requirements.txt", "r") as f:
    requirements = f.read().splitlines()
    requirements = [l for l in requirements if l and not l.startswith('#')]

setuptools.setup(
    name="numpynetpbm",
    version="1.0.0",
    author="Jasper Phelps",
    author_email="jasper.s.phelps@gmail.com",
    description="Load and save netpbm (PBM, PGM, PPM) images as numpy arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/jasper-tms/npnetpbm",
    license='GNU GPL v3',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        "Programming Language :: Python :: 3",
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require={'test': ['pytest']},
)
