"""Configuration constants"""
