from setuptools import setup
from glob import glob

package_name = "image_tools"

setup(
    name=package_name,
    version="0.1.0",
    packages=[package_name],

    # ── Python-side runtime deps ─────────────────────────────────
    # rclpy / sensor_msgs / std_msgs come from the ROS install (package.xml)
    install_requires=[
        "setuptools",
        "numpy",
        "opencv-python",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    maintainer="YourName",
    maintainer_email="you@example.com",
    description="ROS 2 camera publisher: V4L2 / synthetic frames to sensor_msgs/Image",
    license="Apache License 2.0",

    # ── data files to install (manifest, marker, launch) ─────────
    data_files=[
        # ament resource index
        ("share/ament_index/resource_index/packages",
         [f"resource/{package_name}"]),
        # package manifest
        (f"share/{package_name}", ["package.xml"]),
        # all launch files in launch/
        (f"share/{package_name}/launch", glob("launch/*.py")),
    ],

    # ── entry-points (executables) ───────────────────────────────
    entry_points={
        "console_scripts": [
            "cam2image = image_tools.cam2image:main",
        ],
    },
)
