from setuptools import find_packages
from setuptools import setup

setup(
    name='trendfit',
    version='0.0.1',
    description='Least squares trend lines with greedy outlier removal.',
    license='MIT',
    keywords='regression outliers trendline',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Development Status :: 3 - Alpha',
        'Environment :: Other Environment',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    install_requires=['numpy'],
    extras_require={'test': ['scipy']},
    packages=find_packages(exclude=['notebooks']),
    test_suite='trendfit',
)
