from setuptools import setup, find_packages

setup(
    name='safepath',
    version='0.1.0',
    author='Thomas Hansen',
    author_email='thomas.hansen@queensu.ca',
    description='Dot-path access to nested dicts with composable runtime validation.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'pydantic>=2',
        'platformdirs',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
