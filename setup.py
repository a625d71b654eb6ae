"""
Patna Metro Route API - Build Script
"""

from setuptools import setup, find_namespace_packages


setup(
    name='patna-metro-route',
    version='1.0.0',
    author='Patna Metro Route Team',
    description='Route, interchange and fare estimates for the Patna Metro network',
    long_description='''
    FastAPI service that resolves the station sequence between two Patna Metro
    stations (at most one line change) and estimates travel time and fare.
    ''',
    packages=find_namespace_packages(include=['app', 'app.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.22.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
            'pytest-cov>=4.0',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
