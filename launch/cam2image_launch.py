# image_tools/launch/cam2image_launch.py
#=================================================================----
# ────────────────────────────────────────────────────────────────----
# Launches
#   • cam2image   → /image   (sensor_msgs/Image)
#                 ← /flip_image (std_msgs/Bool)
#=================================================================----
# Run (defaults):
#   ros2 launch image_tools cam2image_launch.py
#=================================================================----
# Common overrides:
#   ros2 launch image_tools cam2image_launch.py burger_mode:=true
#   ros2 launch image_tools cam2image_launch.py device:=/dev/video2 freq:=15.0
#   ros2 launch image_tools cam2image_launch.py reliability:=best_effort depth:=1
# ────────────────────────────────────────────────────────────────----
#=================================================================----
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue

def generate_launch_description() -> LaunchDescription:
    # ─────────────── launch-time arguments ────────────────
    launch_args = [
        # capture
        DeclareLaunchArgument("device",       default_value="/dev/video0"),
        DeclareLaunchArgument("topic",        default_value="image"),
        DeclareLaunchArgument("width",        default_value="640"),
        DeclareLaunchArgument("height",       default_value="480"),
        DeclareLaunchArgument("freq",         default_value="30.0"),
        DeclareLaunchArgument("burger_mode",  default_value="false"),
        DeclareLaunchArgument("show_camera",  default_value="false"),

        # publisher QoS
        DeclareLaunchArgument("history",      default_value="keep_last"),
        DeclareLaunchArgument("depth",        default_value="10"),
        DeclareLaunchArgument("reliability",  default_value="reliable"),
    ]

    # ─────────────── cam2image ────────────────
    cam_node = Node(
        package="image_tools",
        executable="cam2image",
        name="cam2image",
        output="screen",
        parameters=[{
            "device":      LaunchConfiguration("device"),
            "topic":       LaunchConfiguration("topic"),
            "width":       ParameterValue(LaunchConfiguration("width"), value_type=int),
            "height":      ParameterValue(LaunchConfiguration("height"), value_type=int),
            "freq":        ParameterValue(LaunchConfiguration("freq"), value_type=float),
            "burger_mode": ParameterValue(LaunchConfiguration("burger_mode"), value_type=bool),
            "show_camera": ParameterValue(LaunchConfiguration("show_camera"), value_type=bool),
            "history":     LaunchConfiguration("history"),
            "depth":       ParameterValue(LaunchConfiguration("depth"), value_type=int),
            "reliability": LaunchConfiguration("reliability"),
        }],
    )

    return LaunchDescription(launch_args + [cam_node])
