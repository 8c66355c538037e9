# tests/conftest.py
import matplotlib

# 测试环境没有显示器，统一使用无界面后端
matplotlib.use("Agg")
