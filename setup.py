from setuptools import find_packages, setup

package_name = 'virtual_joystick_controller'

setup(
    name=package_name,
    version='1.0.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.11',
    install_requires=['setuptools', 'PyQt5'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    keywords=['joystick', 'qt', 'widget', 'virtual controller'],
    description='On-screen virtual joystick controller with axis restriction and return to center.',
    license='GPL-2.0-or-later',
    entry_points={
        'console_scripts': [
            'virtual_joystick_controller_demo = ' + package_name + '.main:main',
        ],
    },
)
