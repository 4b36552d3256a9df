import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rayfield",
    version="0.1.0",
    author="Michael J. Hayford",
    author_email="mjhoptics@gmail.com",
    description="Interactive 2D geometric optics: rays, mirrors, lenses "
                "and prisms",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'ray tracing', 'reflection',
              'refraction', 'snell', 'prism', 'mirror'],
    install_requires=[
        "numpy>=1.15.0",
        "scipy>=1.1.0",
        "matplotlib>=2.2.3",
        "json_tricks>=3.12.1",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
)
