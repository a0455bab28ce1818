from setuptools import setup, find_packages

NAME = 'cyview'

setup(
    name=NAME,
    version='v0.1',
    description="Cyclic windowed views over fixed size buffers",
    packages=find_packages(include=[NAME, f'{NAME}.*']),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        # base
        'numpy',
    ],
)
