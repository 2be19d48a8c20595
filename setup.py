"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='casework',
	version='0.1.0',
	packages=['casework', "casework.examples", ],
	entry_points={
		'console_scripts': ["casework = casework.cmdline:main"],
	},
	license='MIT',
	description='Tagged variants for Python: closed case sets, raw values, associated data, recursion, and exhaustive case analysis',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
