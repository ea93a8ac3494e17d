"""TaskMatch - a marketplace matching customers' jobs with freelancers."""
