import matplotlib.pyplot as plt

def plot_metrics(metrics, show=True):
    figures = []
    for key, values in metrics.data.items():
        fig = plt.figure()
        plt.plot(values)
        plt.title(f"{key.replace('_', ' ').title()} Per Query")
        plt.xlabel("Query")
        plt.ylabel(key.replace('_', ' ').title())
        plt.grid(True)
        plt.tight_layout()
        figures.append(fig)
    if show:
        plt.show()
    return figures
