# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='circsum',
    version='0.1.0',
    description='Circular adjacent-digit sums with a NumPy benchmark harness',
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Benchmarks, examples and tests are run from a source checkout only.
    packages=find_packages(include=['circsum', 'circsum.*']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['circsum=circsum.tools.solve_cli:main'],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
