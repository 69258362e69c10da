"""Crew Lambda Handler"""
